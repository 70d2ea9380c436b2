"""刮削器模块"""

from .base_scraper import BaseScraper
from .csfd import CsfdMetadataScraper, CsfdArtworkScraper

__all__ = [
    'BaseScraper',
    'CsfdMetadataScraper',
    'CsfdArtworkScraper',
]
