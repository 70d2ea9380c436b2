"""
CSFD 元数据刮削器
按 ID 或上次搜索结果刮削详情页，以及按标题搜索
"""

from functools import partial
from typing import Optional, Dict, Any, List
from urllib.parse import quote_plus

from lxml.html import HtmlElement

from ..base_scraper import BaseScraper
from ...core.models import MetadataRecord, ProviderInfo, ScrapeOptions, SearchCandidate
from ...processors.genre_processor import GenreProcessor
from ...utils.text_utils import remove_non_search_characters, substr
from ...web.exceptions import ResolutionError
from ...web.request import Request
from .detail_parser import (
    extract_title_year,
    extract_genres,
    extract_rating,
    extract_plot,
    extract_poster,
    extract_cast,
)
from .search_parser import parse_search_results, score_candidates, YEAR_MISMATCH_PENALTY


class CsfdMetadataScraper(BaseScraper):
    """CSFD 元数据刮削器"""

    name = 'csfd'

    def __init__(
        self,
        config: Dict[str, Any],
        provider_info: ProviderInfo,
        request: Optional[Request] = None,
        genre_processor: Optional[GenreProcessor] = None
    ):
        """
        初始化刮削器

        Args:
            config: 配置字典
            provider_info: 数据源身份
            request: HTTP 客户端（可选）
            genre_processor: Genre 处理器（可选，默认加载内置映射表）
        """
        super().__init__(config, provider_info, request)
        self.genre_processor = genre_processor or GenreProcessor()
        self.year_penalty = config.get('search', {}).get('year_penalty', YEAR_MISMATCH_PENALTY)

        # 提取器按固定顺序执行
        self.extractors = (
            ('title', extract_title_year),
            ('genre', partial(extract_genres, genre_processor=self.genre_processor)),
            ('rating', extract_rating),
            ('plot', extract_plot),
            ('poster', extract_poster),
            ('cast', extract_cast),
        )

    def detail_url(self, csfd_id: str) -> str:
        return f"{self.base_url}/film/{csfd_id}"

    def search_url(self, query: str) -> str:
        return f"{self.base_url}/hledat/?q={quote_plus(query)}"

    def resolve_detail_url(self, options: ScrapeOptions) -> str:
        """
        确定详情页 URL

        优先级：
        1. 请求中的 CSFD ID
        2. 上次搜索结果中的 URL
        3. IMDb ID：按该 ID 搜索，取第一个结果（失败只记日志）

        Raises:
            ResolutionError: 无法得到可用的 URL
        """
        csfd_id = options.get_id(self.provider_id)
        if csfd_id:
            return self.detail_url(csfd_id)

        if options.result is not None and options.result.url:
            return options.result.url

        imdb_id = options.get_id('imdb')
        if imdb_id:
            results = self.search(imdb_id)
            if results:
                self.logger.debug(f"IMDb ID {imdb_id} -> {results[0].url}")
                return results[0].url
            self.logger.warning(f"按 IMDb ID 搜索无结果: {imdb_id}")

        raise ResolutionError(self.name)

    def get_metadata(self, options: ScrapeOptions) -> MetadataRecord:
        """
        刮削影片元数据

        Args:
            options: 刮削请求参数

        Returns:
            MetadataRecord 对象

        Raises:
            UnsupportedMediaTypeError: 非电影
            ResolutionError: 无法确定详情页
            FetchError: 网络错误
            ParseError: 页面无法解析
        """
        self.logger.debug(f"getMetadata() {options}")
        self._check_media_type(options)

        detail_url = self.resolve_detail_url(options)

        md = MetadataRecord(provider_id=self.provider_id)
        csfd_id = substr(detail_url, r'film/(\d+)')
        if csfd_id:
            md.ids[self.provider_id] = csfd_id

        self.logger.debug(f"get details page {detail_url}")
        doc = self._fetch_document(detail_url)

        self.parse_detail(doc, md, detail_url)
        return md

    def parse_detail(self, doc: HtmlElement, md: MetadataRecord, detail_url: str = '') -> MetadataRecord:
        """
        依次执行各字段提取器

        单个字段的问题（包括提取器内部的意外异常）只记录日志，不影响其他字段
        """
        for field_name, extractor in self.extractors:
            try:
                issue = extractor(doc, md)
            except Exception as e:
                self.logger.warning(f"{detail_url}: 提取 {field_name} 时出错: {e}", exc_info=True)
                continue

            if issue is not None:
                self.logger.warning(f"{detail_url}: {issue}")

        return md

    def search(self, query: str, year: Optional[str] = None, media_type: str = 'movie') -> List[SearchCandidate]:
        """
        按标题搜索

        任何失败都只记录日志并返回空列表

        Args:
            query: 搜索词
            year: 年份提示（只影响排序）
            media_type: 媒体类型

        Returns:
            按相关度降序排列的搜索结果
        """
        self.logger.debug(f"search() query={query!r} year={year!r}")

        if media_type not in self.supported_media_types:
            self.logger.warning(f"不支持的媒体类型: {media_type}")
            return []

        if not query or not query.strip():
            return []

        try:
            search_query = remove_non_search_characters(query)
            self.logger.debug(f"search for everything: {search_query}")

            doc = self._fetch_document(self.search_url(search_query))
            candidates = parse_search_results(doc, self.base_url, self.provider_id)
            if not candidates:
                self.logger.debug("nothing found")
                return []

            return score_candidates(candidates, query, year, self.year_penalty)

        except Exception as e:
            self.error_handler.handle_exception(e, self.name, query)
            return []
