"""
搜索结果相关度评分
"""

from difflib import SequenceMatcher

from .text_utils import normalize_whitespace


def calculate_score(query: str, title: str) -> float:
    """
    计算搜索词与候选标题的相关度

    Args:
        query: 搜索词
        title: 候选标题

    Returns:
        0.0 - 1.0 之间的分数，完全相同（忽略大小写和多余空白）为 1.0
    """
    a = normalize_whitespace(query).lower()
    b = normalize_whitespace(title).lower()
    if not a or not b:
        return 0.0
    if a == b:
        return 1.0
    return SequenceMatcher(None, a, b).ratio()
