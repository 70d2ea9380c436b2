"""
CSFD 详情页解析

每个提取器只负责一个字段：从文档中读取数据，写入 MetadataRecord，
页面结构不符合预期时返回 FieldIssue（不抛异常），该字段保持未设置
"""

import logging
import re
from typing import Optional

from lxml.html import HtmlElement

from ...core.models import MetadataRecord, CastEntry, CastType, FieldIssue
from ...processors.genre_processor import GenreProcessor
from ...utils.text_utils import remove_common_sortable_name, fix_image_url, normalize_whitespace


logger = logging.getLogger(__name__)

# <meta property="og:title" content="Planeta opic / Planet of the Apes (1968)">
OG_TITLE_PATTERN = re.compile(r'(.*) / (.*) \(([0-9]{4})\)')

# "USA, 1968, 112 min"
ORIGIN_YEAR_PATTERN = re.compile(r'.*, ([0-9]{4}).*')

# 创作者标题 -> 演职员类型（精确匹配，其余为 OTHER）
CAST_ROLE_LABELS = {
    'Režie:': CastType.DIRECTOR,
    'Předloha:': CastType.WRITER,
    'Hrají:': CastType.ACTOR,
}


def _first(elements):
    return elements[0] if elements else None


def classify_cast_heading(heading: str) -> CastType:
    """根据创作者区块的标题文本确定演职员类型"""
    return CAST_ROLE_LABELS.get(heading, CastType.OTHER)


def parse_rating(text: Optional[str]) -> Optional[float]:
    """
    把百分比评分转换为 0 - 10 分

    Examples:
        >>> parse_rating("86%")
        8.6

    Args:
        text: 页面上的评分文本

    Returns:
        评分；空文本或非数字返回 None
    """
    text = normalize_whitespace(text).replace('%', '').replace(',', '.').strip()
    if not text:
        return None
    try:
        return float(text) / 10.0
    except ValueError:
        return None


def extract_title_year(doc: HtmlElement, md: MetadataRecord) -> Optional[FieldIssue]:
    """
    标题 / 原始标题 / 年份

    优先解析 og:title（"本地标题 / 原始标题 (年份)"），
    不符合该格式时退回到页头 h1 的文本和 origin 区块中的 ", 年份"
    """
    og_title = _first(doc.xpath("//meta[@property='og:title']"))
    if og_title is not None:
        m = OG_TITLE_PATTERN.fullmatch(normalize_whitespace(og_title.get('content')))
        if m:
            md.title = remove_common_sortable_name(m.group(1))
            md.original_title = remove_common_sortable_name(m.group(2))
            md.year = m.group(3)
            return None

    header = _first(doc.find_class('header'))
    h1 = header.find('.//h1') if header is not None else None
    title = normalize_whitespace(h1.text) if h1 is not None else ''
    if title:
        md.title = title

    origin = _first(doc.find_class('origin'))
    if origin is not None:
        m = ORIGIN_YEAR_PATTERN.fullmatch(normalize_whitespace(origin.text_content()))
        if m:
            md.year = m.group(1)

    if not title:
        return FieldIssue('title', "no og:title in 'local / original (year)' form and no header title")
    return None


def extract_genres(doc: HtmlElement, md: MetadataRecord, genre_processor: GenreProcessor) -> Optional[FieldIssue]:
    """Genre：每个 .genre 元素是一行 "Drama / Sci-Fi"，按页面顺序追加（不去重）"""
    genre_elements = doc.find_class('genre')
    if not genre_elements:
        return FieldIssue('genre', "no .genre element")

    for element in genre_elements:
        for genre in genre_processor.process_genre_line(normalize_whitespace(element.text_content())):
            md.add_genre(genre)
    return None


def extract_rating(doc: HtmlElement, md: MetadataRecord) -> Optional[FieldIssue]:
    """评分（百分比 / 10）和投票数"""
    vote_element = _first(doc.xpath("//*[@itemprop='ratingCount']"))
    if vote_element is not None:
        votes = re.sub(r'\D', '', vote_element.get('content') or vote_element.text_content())
        if votes:
            md.vote_count = int(votes)

    ratings = doc.find_class('average')
    if not ratings:
        return FieldIssue('rating', "no .average element")

    text = ' '.join(r.text_content() for r in ratings)
    rating = parse_rating(text)
    if rating is None:
        return FieldIssue('rating', f"could not parse rating: {text.strip()!r}", structural=False)

    md.rating = rating
    return None


def extract_plot(doc: HtmlElement, md: MetadataRecord) -> Optional[FieldIssue]:
    """
    简介：#plots 中第一个 .content 下的第一个 div

    缺少容器是结构错误；容器存在但内容为空时简介为空字符串
    """
    plots = doc.get_element_by_id('plots', None)
    if plots is None:
        return FieldIssue('plot', "no #plots element")

    content = _first(plots.find_class('content'))
    block = _first(content.xpath('.//div')) if content is not None else None
    if block is None:
        return FieldIssue('plot', "no plot text block in #plots")

    md.plot = normalize_whitespace(block.text_content())
    return None


def extract_poster(doc: HtmlElement, md: MetadataRecord) -> Optional[FieldIssue]:
    """海报：#poster 中第一张图片，修复协议相对地址"""
    poster = doc.get_element_by_id('poster', None)
    img = next(poster.iter('img'), None) if poster is not None else None
    if img is None:
        return FieldIssue('poster', "no image in #poster")

    src = fix_image_url(img.get('src'))
    if not src:
        return FieldIssue('poster', "poster image has no src", structural=False)

    md.poster_url = src
    return None


def extract_cast(doc: HtmlElement, md: MetadataRecord) -> Optional[FieldIssue]:
    """
    演职员：.creators 中的每个 h4 标题决定类型，
    标题所在区块中的每个链接是一位演职员
    """
    creators = _first(doc.find_class('creators'))
    if creators is None:
        return FieldIssue('cast', "no .creators element")

    for heading in creators.iter('h4'):
        role = classify_cast_heading(normalize_whitespace(heading.text_content()))
        block = heading.getparent()
        for link in block.iter('a'):
            name = normalize_whitespace(link.text_content())
            if name:
                md.add_cast_member(CastEntry(name=name, role=role))
    return None
