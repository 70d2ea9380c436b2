"""
数据处理器模块

包含 Genre 翻译
"""

from .genre_processor import GenreProcessor

__all__ = [
    'GenreProcessor',
]
