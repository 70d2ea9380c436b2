"""
数据源注册表
把数据源 ID 映射到它提供的能力（metadata / search / artwork），供插件入口分发请求
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Any, List, Optional

from .. import __version__
from ..core.models import ProviderInfo
from ..core.provider_info import create_metadata_provider_info, create_artwork_provider_info
from ..processors.genre_processor import GenreProcessor
from ..scrapers.csfd import CsfdMetadataScraper, CsfdArtworkScraper
from ..web.request import Request


logger = logging.getLogger(__name__)

# 宿主程序识别的能力名称
CAPABILITY_METADATA = 'metadata'
CAPABILITY_SEARCH = 'search'
CAPABILITY_ARTWORK = 'artwork'


@dataclass(frozen=True)
class ProviderEntry:
    """一个已注册的数据源：身份 + 能力表"""
    info: ProviderInfo
    capabilities: Dict[str, Callable] = field(default_factory=dict)

    def supports(self, capability: str) -> bool:
        return capability in self.capabilities

    def to_dict(self) -> Dict[str, Any]:
        data = self.info.to_dict()
        data['capabilities'] = sorted(self.capabilities)
        return data


class ProviderRegistry:
    """数据源注册表"""

    def __init__(self):
        self._providers: Dict[str, ProviderEntry] = {}

    def register(self, info: ProviderInfo, **capabilities: Callable) -> ProviderEntry:
        """
        注册数据源

        Args:
            info: 数据源身份
            **capabilities: 能力名 -> 入口函数

        Returns:
            ProviderEntry 对象
        """
        if info.id in self._providers:
            raise ValueError(f"数据源已注册: {info.id}")

        entry = ProviderEntry(info=info, capabilities=dict(capabilities))
        self._providers[info.id] = entry
        logger.debug(f"注册数据源 {info.id}: {sorted(capabilities)}")
        return entry

    def get(self, provider_id: str) -> Optional[ProviderEntry]:
        return self._providers.get(provider_id)

    def find(self, capability: str, provider_id: Optional[str] = None) -> Optional[ProviderEntry]:
        """
        查找提供某能力的数据源

        Args:
            capability: 能力名
            provider_id: 指定的数据源 ID（可选，不指定时返回第一个支持该能力的数据源）

        Returns:
            ProviderEntry 对象，找不到返回 None
        """
        if provider_id:
            entry = self.get(provider_id)
            return entry if entry is not None and entry.supports(capability) else None

        for entry in self._providers.values():
            if entry.supports(capability):
                return entry
        return None

    def describe(self) -> List[Dict[str, Any]]:
        return [entry.to_dict() for entry in self._providers.values()]


def create_default_registry(config: Dict[str, Any], request: Optional[Request] = None) -> ProviderRegistry:
    """
    根据配置构建 CSFD 的两个数据源（元数据 + 图库）

    Args:
        config: 配置字典
        request: 共享的 HTTP 客户端（可选）

    Returns:
        ProviderRegistry 对象
    """
    request = request or Request(config)
    genre_processor = GenreProcessor()

    metadata_scraper = CsfdMetadataScraper(
        config,
        create_metadata_provider_info(config, __version__),
        request=request,
        genre_processor=genre_processor,
    )
    artwork_scraper = CsfdArtworkScraper(
        config,
        create_artwork_provider_info(config, __version__),
        request=request,
    )

    registry = ProviderRegistry()
    registry.register(
        metadata_scraper.provider_info,
        **{
            CAPABILITY_METADATA: metadata_scraper.get_metadata,
            CAPABILITY_SEARCH: metadata_scraper.search,
        }
    )
    registry.register(
        artwork_scraper.provider_info,
        **{CAPABILITY_ARTWORK: artwork_scraper.get_artwork}
    )
    return registry
