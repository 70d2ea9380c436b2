"""
CSFD 图库页解析
"""

import logging
import re
from typing import List

from lxml.html import HtmlElement

from ...core.models import ArtworkEntry, ArtworkType
from ...utils.text_utils import fix_image_url


logger = logging.getLogger(__name__)

# style="background-image: url('//img.csfd.cz/files/images/film/photos/...jpg')"
STYLE_URL_PATTERN = re.compile(r".*'(.*)'.*", re.DOTALL)


def parse_gallery(doc: HtmlElement, provider_id: str = '') -> List[ArtworkEntry]:
    """
    解析图库页：每个 .photo 元素的内联样式中用单引号包裹的背景图地址是一张图片

    Args:
        doc: 图库页文档
        provider_id: 数据源 ID

    Returns:
        图片列表（页面顺序，不去重）；没有图库时返回空列表
    """
    artworks = []

    for photo in doc.find_class('photo'):
        m = STYLE_URL_PATTERN.fullmatch(photo.get('style') or '')
        if not m:
            continue

        background_url = fix_image_url(m.group(1))
        if not background_url:
            continue

        logger.debug(f"Found artwork at {background_url}")
        artworks.append(ArtworkEntry(
            type=ArtworkType.BACKGROUND,
            url=background_url,
            preview_url=background_url,
            provider_id=provider_id,
        ))

    return artworks
