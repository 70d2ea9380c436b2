"""Web 模块 - HTTP 客户端和异常"""

from .exceptions import *
from .request import Request, parse_html

__all__ = ['Request', 'parse_html', 'ScraperError', 'FetchError', 'SiteBlocked',
           'ParseError', 'ResolutionError', 'UnsupportedMediaTypeError']
