"""工具模块"""

from .similarity import calculate_score
from .text_utils import (
    fix_image_url,
    normalize_whitespace,
    remove_common_sortable_name,
    remove_non_search_characters,
    substr,
)

__all__ = [
    'calculate_score',
    'fix_image_url',
    'normalize_whitespace',
    'remove_common_sortable_name',
    'remove_non_search_characters',
    'substr',
]
