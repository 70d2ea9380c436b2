"""
基础刮削器类
所有刮削器的基类：持有配置、数据源身份、HTTP 客户端和错误处理器
"""

import logging
from typing import Optional, Dict, Any

from lxml.html import HtmlElement

from ..core.error_handler import ErrorHandler
from ..core.models import ProviderInfo, ScrapeOptions
from ..web.exceptions import UnsupportedMediaTypeError
from ..web.request import Request


logger = logging.getLogger(__name__)


class BaseScraper:
    """刮削器基类"""

    # 数据源名称（子类必须设置）
    name: str = 'base'

    # 支持的媒体类型
    supported_media_types = ('movie',)

    def __init__(
        self,
        config: Dict[str, Any],
        provider_info: ProviderInfo,
        request: Optional[Request] = None
    ):
        """
        初始化刮削器

        Args:
            config: 配置字典
            provider_info: 数据源身份（启动时构建一次）
            request: HTTP 客户端（可选，默认按配置新建）
        """
        self.config = config
        self.provider_info = provider_info
        self.base_url = config.get('site', {}).get('base_url', '').rstrip('/')
        self.request = request or Request(config)
        self.logger = logging.getLogger(f"{__name__}.{self.name}")
        self.error_handler = ErrorHandler(config, self.logger)

    @property
    def provider_id(self) -> str:
        return self.provider_info.id

    def _check_media_type(self, options: ScrapeOptions):
        """
        Raises:
            UnsupportedMediaTypeError: 媒体类型不受支持
        """
        if options.media_type not in self.supported_media_types:
            raise UnsupportedMediaTypeError(options.media_type)

    def _fetch_document(self, url: str) -> HtmlElement:
        """
        获取并解析页面（FetchError / ParseError 直接向上传播）

        Args:
            url: 页面地址

        Returns:
            lxml 文档
        """
        self.logger.debug(f"获取页面: {url}")
        return self.request.get_html(url, encoding='utf-8')
