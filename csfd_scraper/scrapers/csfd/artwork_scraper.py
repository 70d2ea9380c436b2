"""
CSFD 图库刮削器
"""

from typing import List

from ..base_scraper import BaseScraper
from ...core.models import ArtworkEntry, ScrapeOptions
from ...web.exceptions import ResolutionError
from .gallery_parser import parse_gallery


class CsfdArtworkScraper(BaseScraper):
    """CSFD 图库刮削器"""

    name = 'csfd-artwork'

    def gallery_url(self, csfd_id: str) -> str:
        return f"{self.base_url}/film/{csfd_id}/galerie"

    def resolve_id(self, options: ScrapeOptions) -> str:
        """
        确定 CSFD ID：图库数据源自己的 ID -> 元数据数据源的 ID -> 上次搜索结果的 ID

        Raises:
            ResolutionError: 请求中没有可用的 ID
        """
        metadata_id = self.config.get('provider', {}).get('metadata_id', 'csfd')
        csfd_id = options.get_id(self.provider_id) or options.get_id(metadata_id)
        if not csfd_id and options.result is not None:
            csfd_id = options.result.id
        if not csfd_id:
            raise ResolutionError(self.name, "图库需要 CSFD ID", "Gallery requires a CSFD id")
        return csfd_id

    def get_artwork(self, options: ScrapeOptions) -> List[ArtworkEntry]:
        """
        获取影片图库

        Args:
            options: 刮削请求参数

        Returns:
            图片列表（页面顺序）

        Raises:
            UnsupportedMediaTypeError: 非电影
            ResolutionError: 没有 CSFD ID
            FetchError: 网络错误
            ParseError: 页面无法解析
        """
        self.logger.debug(f"get artwork options {options}")
        self._check_media_type(options)

        csfd_id = self.resolve_id(options)
        self.logger.debug(f"get artwork page id={csfd_id}")

        doc = self._fetch_document(self.gallery_url(csfd_id))
        artworks = parse_gallery(doc, self.provider_id)
        self.logger.info(f"找到 {len(artworks)} 张图片: {csfd_id}")
        return artworks
