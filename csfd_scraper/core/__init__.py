"""
核心模块
"""

from .config_loader import load_config
from .error_handler import ErrorHandler, ErrorCategory, StructuredError
from .genres import Genre
from .models import (
    ArtworkEntry,
    ArtworkType,
    CastEntry,
    CastType,
    FieldIssue,
    MetadataRecord,
    ProviderInfo,
    ScrapeOptions,
    SearchCandidate,
)

__all__ = [
    'load_config',
    'ErrorHandler',
    'ErrorCategory',
    'StructuredError',
    'Genre',
    'ArtworkEntry',
    'ArtworkType',
    'CastEntry',
    'CastType',
    'FieldIssue',
    'MetadataRecord',
    'ProviderInfo',
    'ScrapeOptions',
    'SearchCandidate',
]
