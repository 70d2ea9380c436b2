"""
数据源身份
在插件启动时根据配置构建一次，显式传给需要数据源 ID 的组件
"""

from typing import Dict, Any

from .models import ProviderInfo


def create_metadata_provider_info(config: Dict[str, Any], version: str = "") -> ProviderInfo:
    """构建元数据数据源（详情页 + 搜索）的身份"""
    provider_config = config.get('provider', {})
    return ProviderInfo(
        id=provider_config.get('metadata_id', 'csfd'),
        name="Česko-Slovenská filmová databáze (CSFD.cz)",
        description="<html><h3>Česko-Slovenská filmová databáze</h3><br />Available languages: CZ</html>",
        icon=provider_config.get('icon'),
        version=version,
    )


def create_artwork_provider_info(config: Dict[str, Any], version: str = "") -> ProviderInfo:
    """构建图库数据源的身份"""
    provider_config = config.get('provider', {})
    return ProviderInfo(
        id=provider_config.get('artwork_id', 'csfd-artwork'),
        name="CSFD.cz galerie",
        description="<html><h3>Česko-Slovenská filmová databáze - stahovač galerie</h3><br />Available languages: CZ</html>",
        icon=provider_config.get('icon'),
        version=version,
    )
