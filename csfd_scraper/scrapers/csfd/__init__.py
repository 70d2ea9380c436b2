"""
CSFD 刮削器模块
"""

from .metadata_scraper import CsfdMetadataScraper
from .artwork_scraper import CsfdArtworkScraper

__all__ = [
    'CsfdMetadataScraper',
    'CsfdArtworkScraper',
]
