"""
数据源管理模块
"""

from .provider_registry import (
    CAPABILITY_ARTWORK,
    CAPABILITY_METADATA,
    CAPABILITY_SEARCH,
    ProviderEntry,
    ProviderRegistry,
    create_default_registry,
)

__all__ = [
    'CAPABILITY_ARTWORK',
    'CAPABILITY_METADATA',
    'CAPABILITY_SEARCH',
    'ProviderEntry',
    'ProviderRegistry',
    'create_default_registry',
]
