"""CSFD Scraper Plugin - csfd.cz 电影元数据和图库刮削插件"""

__version__ = "1.0.0"
__author__ = "Media Manager"
__description__ = "Metadata and artwork scraper for csfd.cz"

# 导出主要的类和函数
from .core import load_config, Genre, MetadataRecord, SearchCandidate, ArtworkEntry, ScrapeOptions
from .managers import ProviderRegistry, create_default_registry
from .processors import GenreProcessor
from .scrapers import CsfdMetadataScraper, CsfdArtworkScraper
from .web import Request

__all__ = [
    # 核心模块
    'load_config',
    'Genre',
    'MetadataRecord',
    'SearchCandidate',
    'ArtworkEntry',
    'ScrapeOptions',
    # 数据源
    'ProviderRegistry',
    'create_default_registry',
    # 处理器
    'GenreProcessor',
    # 刮削器
    'CsfdMetadataScraper',
    'CsfdArtworkScraper',
    # HTTP 客户端
    'Request',
]
