#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
text_utils.py

文本处理工具模块
标题排序名规范化、搜索词清洗、图片 URL 修复等
"""

import re
from typing import Optional


# 排序名中常见的冠词（"Matrix, The" -> "The Matrix"）
COMMON_ARTICLES = (
    'the', 'a', 'an',
    'der', 'die', 'das', 'ein', 'eine',
    'le', 'la', 'les', "l'", 'un', 'une',
    'el', 'los', 'las',
    'il', 'lo', 'gli',
)

_SORTABLE_NAME_PATTERN = re.compile(
    r'^(?P<title>.+?),\s*(?P<article>' + '|'.join(re.escape(a) for a in COMMON_ARTICLES) + r')$',
    re.IGNORECASE
)


def remove_common_sortable_name(title: Optional[str]) -> str:
    """
    把排序用的标题还原为正常形式

    Examples:
        >>> remove_common_sortable_name("Matrix, The")
        'The Matrix'
        >>> remove_common_sortable_name("Planet of the Apes")
        'Planet of the Apes'

    Args:
        title: 标题

    Returns:
        规范化后的标题（None 返回空字符串）
    """
    if not title:
        return ''

    title = title.strip()
    m = _SORTABLE_NAME_PATTERN.match(title)
    if not m:
        return title

    article = m.group('article')
    separator = '' if article.endswith("'") else ' '
    return f"{article}{separator}{m.group('title').strip()}"


def remove_non_search_characters(query: Optional[str]) -> str:
    """
    移除不适合放进搜索词的字符

    点号、井号、星号、下划线替换为空格，其余非字母数字字符（撇号和连字符除外）删除

    Examples:
        >>> remove_non_search_characters("Krtek.a.autíčko")
        'Krtek a autíčko'

    Args:
        query: 原始搜索词

    Returns:
        清洗后的搜索词
    """
    if not query:
        return ''

    query = re.sub(r'[.#*_]', ' ', query)
    query = re.sub(r"[^\w\s'\-]", '', query)
    return normalize_whitespace(query)


def fix_image_url(src: Optional[str]) -> Optional[str]:
    """
    修复协议相对的 URL（"//img.csfd.cz/x.jpg" -> "http://img.csfd.cz/x.jpg"）

    已经以 http 开头的 URL 原样返回（幂等）

    Args:
        src: 图片地址

    Returns:
        修复后的地址；空值返回 None
    """
    if not src:
        return None

    src = src.strip()
    if not src.startswith('http'):
        src = 'http:' + src
    return src


def substr(text: Optional[str], pattern: str) -> str:
    """
    返回正则表达式第一个分组的匹配内容

    Args:
        text: 原文
        pattern: 至少包含一个分组的正则表达式

    Returns:
        匹配内容，未匹配返回空字符串
    """
    if not text:
        return ''
    m = re.search(pattern, text)
    if not m:
        return ''
    return m.group(1) or ''


def normalize_whitespace(text: Optional[str]) -> str:
    """把连续空白（含换行、不间断空格）压缩为一个空格"""
    if not text:
        return ''
    return ' '.join(text.split())
