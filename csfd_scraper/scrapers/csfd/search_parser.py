"""
CSFD 搜索结果页解析和排序
"""

import logging
from typing import List, Optional

from lxml.html import HtmlElement

from ...core.models import SearchCandidate
from ...utils.similarity import calculate_score
from ...utils.text_utils import fix_image_url, normalize_whitespace, substr


logger = logging.getLogger(__name__)

# 年份不符时的降分（只用于打破平局，不是过滤条件）
YEAR_MISMATCH_PENALTY = 0.01


def _ancestor(element: HtmlElement, levels: int) -> Optional[HtmlElement]:
    """向上查找第 levels 层父元素，不足时返回最远的祖先"""
    current = element
    for _ in range(levels):
        parent = current.getparent()
        if parent is None:
            break
        current = parent
    return current


def _parse_year(link: HtmlElement) -> Optional[str]:
    """
    年份：优先取条目描述段落最后一个逗号之后的部分（"Drama, USA, 1968"），
    "其他结果" 列表中没有描述段落，改用 .film-year（"(1968)"）
    """
    paragraphs = list(_ancestor(link, 2).iter('p'))
    if paragraphs:
        description = normalize_whitespace(paragraphs[0].text_content())
        if ',' in description:
            return description.rsplit(',', 1)[1].strip() or None
        return None

    parent = link.getparent()
    if parent is None:
        return None
    year_text = ' '.join(e.text_content() for e in parent.find_class('film-year'))
    year = normalize_whitespace(year_text.replace('(', '').replace(')', ''))
    return year or None


def _parse_poster(link: HtmlElement) -> Optional[str]:
    """
    缩略图：从链接向上最多三层查找 .film-poster-small，
    到达条目所在的 li 后不再向上（避免取到相邻条目的图片）
    """
    current = link
    for _ in range(3):
        current = current.getparent()
        if current is None:
            break
        posters = current.find_class('film-poster-small')
        if posters:
            return fix_image_url(posters[0].get('src'))
        if current.tag == 'li':
            break
    return None


def parse_search_results(doc: HtmlElement, base_url: str, provider_id: str = '') -> List[SearchCandidate]:
    """
    解析搜索结果页，每个 .film 元素是一个条目

    缺少标题或 URL 的条目被丢弃；单个条目解析失败只跳过该条目

    Args:
        doc: 搜索结果页文档
        base_url: 站点根地址（用于拼接相对链接）
        provider_id: 数据源 ID

    Returns:
        未评分的搜索结果列表（页面顺序）
    """
    results = []
    film_links = doc.find_class('film')
    logger.debug(f"找到 {len(film_links)} 个搜索结果")

    for element in film_links:
        try:
            link = element if element.tag == 'a' else next(element.iter('a'), None)
            if link is None:
                continue

            href = (link.get('href') or '').strip()
            sr = SearchCandidate(provider_id=provider_id)
            sr.id = substr(href, r'film/(\d+)') or None
            sr.title = normalize_whitespace(link.text_content())
            sr.year = _parse_year(link)
            if href:
                if href.startswith('http'):
                    sr.url = href
                else:
                    sr.url = base_url.rstrip('/') + '/' + href.lstrip('/')
            sr.poster_url = _parse_poster(link)

            # 至少要有标题和 URL
            if not sr.title or not sr.url:
                continue

            logger.debug(f"found movie {sr.title} ({sr.year})")
            results.append(sr)
        except Exception as e:
            logger.warning(f"解析搜索结果条目失败: {e}", exc_info=True)

    return results


def score_candidates(
    candidates: List[SearchCandidate],
    query: str,
    year: Optional[str] = None,
    penalty: float = YEAR_MISMATCH_PENALTY
) -> List[SearchCandidate]:
    """
    为搜索结果评分并按分数降序排序（同分保持页面顺序）

    Args:
        candidates: 搜索结果
        query: 用户的搜索词
        year: 年份提示（空值或 "0" 表示没有）
        penalty: 年份不符时扣除的分数

    Returns:
        排好序的新列表
    """
    for sr in candidates:
        score = calculate_score(query, sr.title)
        if year and year != '0' and year != sr.year:
            logger.debug(f"年份不符 ({year} != {sr.year})，降分 {penalty}: {sr.title}")
            score -= penalty
        sr.score = score

    return sorted(candidates, key=lambda sr: sr.score, reverse=True)
