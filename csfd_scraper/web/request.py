"""
HTTP 请求封装

"""

import logging
import requests
import cloudscraper
import lxml.html
from lxml import etree
from typing import Dict, Any, Optional
from requests.models import Response

from .exceptions import FetchError, SiteBlocked, ParseError

logger = logging.getLogger(__name__)


def parse_html(text: str, url: str = None) -> lxml.html.HtmlElement:
    """
    将 HTML 文本解析为 lxml 文档树

    链接保持页面原样（不调用 make_links_absolute），
    相对链接和协议相对的图片地址由各提取器自行修复

    Args:
        text: 已解码的 HTML 文本
        url: 文档地址（仅用于错误消息和 lxml 的 base_url）

    Returns:
        lxml.html.HtmlElement 对象

    Raises:
        ParseError: 文档为空或无法解析
    """
    if not text or not text.strip():
        raise ParseError(url or '<string>', 'empty document')

    try:
        return lxml.html.fromstring(text, base_url=url)
    except (etree.ParserError, etree.XMLSyntaxError, ValueError) as e:
        raise ParseError(url or '<string>', str(e)) from e


class Request:
    """
    HTTP 请求封装类
    支持自定义 headers、cookies、代理等
    支持 CloudFlare 绕过
    """

    # 默认 User-Agent 和浏览器请求头（模拟真实浏览器）
    DEFAULT_HEADERS = {
        'User-Agent': 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/132.0.0.0 Safari/537.36',
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,image/apng,*/*;q=0.8',
        'Accept-Language': 'cs-CZ,cs;q=0.9,sk;q=0.8,en;q=0.7',
        'Accept-Encoding': 'gzip, deflate',
        'Connection': 'keep-alive',
        'Upgrade-Insecure-Requests': '1',
    }

    def __init__(self, config: Optional[Dict[str, Any]] = None, use_scraper: Optional[bool] = None):
        """
        初始化 Request 对象

        Args:
            config: 配置字典，包含 network 配置
            use_scraper: 是否使用 cloudscraper（None 表示按配置 network.use_cloudscraper）
        """
        self.config = config or {}
        network_config = self.config.get('network', {})

        # 设置 headers 和 cookies
        self.headers = self.DEFAULT_HEADERS.copy()
        accept_language = network_config.get('accept_language')
        if accept_language:
            self.headers['Accept-Language'] = accept_language
        self.cookies = {}

        proxy_server = network_config.get('proxy_server')
        if proxy_server:
            self.proxies = {'http': proxy_server, 'https': proxy_server}
            logger.info(f"使用代理: {proxy_server}")
        else:
            self.proxies = {}
            logger.debug("未配置代理,使用直连")

        # 设置超时（不做重试，重试策略由调用方决定）
        self.timeout = network_config.get('timeout', 30)

        if use_scraper is None:
            use_scraper = bool(network_config.get('use_cloudscraper', False))

        if use_scraper:
            self.session = cloudscraper.create_scraper()
            logger.debug("使用 cloudscraper 会话")
        else:
            self.session = requests.Session()

    def get(self, url: str, **kwargs) -> Response:
        """
        发送 GET 请求

        Args:
            url: 请求 URL
            **kwargs: 其他 requests 参数

        Returns:
            Response 对象（调用方负责关闭）

        Raises:
            FetchError: 网络错误
            SiteBlocked: 站点封锁
        """
        try:
            r = self.session.get(
                url,
                headers=self.headers,
                proxies=self.proxies,
                cookies=self.cookies,
                timeout=self.timeout,
                **kwargs
            )
        except requests.exceptions.Timeout as e:
            raise FetchError(f"请求超时: {url}", f"Request timeout: {url}", url) from e
        except requests.exceptions.ConnectionError as e:
            raise FetchError(f"连接错误: {url}", f"Connection error: {url}", url) from e
        except requests.exceptions.RequestException as e:
            raise FetchError(f"请求失败: {url}", f"Request failed: {url}", url) from e

        # 检查 CloudFlare 封锁
        if r.status_code == 403 and b'>Just a moment...<' in r.content:
            r.close()
            raise SiteBlocked(
                f"403 Forbidden: 无法通过 CloudFlare 检测: {url}",
                f"403 Forbidden: Cannot bypass CloudFlare detection: {url}",
                url
            )

        try:
            r.raise_for_status()
        except requests.exceptions.HTTPError as e:
            r.close()
            raise FetchError(
                f"请求失败 (HTTP {r.status_code}): {url}",
                f"Request failed (HTTP {r.status_code}): {url}",
                url,
                r.status_code
            ) from e

        return r

    def get_html(self, url: str, encoding: str = 'utf-8') -> lxml.html.HtmlElement:
        """
        获取 HTML 并解析为 lxml 对象

        响应在解析结束后无条件关闭（包括解析失败的情况）

        Args:
            url: 请求 URL
            encoding: 编码格式

        Returns:
            lxml.html.HtmlElement 对象

        Raises:
            FetchError: 网络错误
            ParseError: 文档无法解析
        """
        r = self.get(url)
        try:
            r.encoding = encoding or r.apparent_encoding
            return parse_html(r.text, url)
        finally:
            r.close()
