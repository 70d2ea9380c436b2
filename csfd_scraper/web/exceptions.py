"""
网页抓取相关的异常
只有致命错误（无法解析 URL、网络故障、文档无法解析）使用异常传播；
单个字段的提取问题不抛异常，见 core.models.FieldIssue
支持双语消息
"""

__all__ = ['ScraperError', 'FetchError', 'SiteBlocked', 'ParseError',
           'ResolutionError', 'UnsupportedMediaTypeError']


class ScraperError(Exception):
    """所有刮削器相关异常的基类（支持双语消息）"""

    def __init__(self, message_zh: str, message_en: str = None, *args):
        """
        初始化异常

        Args:
            message_zh: 中文错误消息
            message_en: 英文错误消息（可选，默认使用中文消息）
            *args: 其他参数
        """
        self.message_zh = message_zh
        self.message_en = message_en or message_zh
        super().__init__(message_zh, *args)

    def get_message(self, locale: str = 'zh') -> str:
        """
        获取指定语言的消息

        Args:
            locale: 语言代码（'zh' 或 'en'）

        Returns:
            对应语言的错误消息
        """
        return self.message_zh if locale == 'zh' else self.message_en


class FetchError(ScraperError):
    """网络传输错误（连接失败、超时、非 2xx 状态码）"""

    def __init__(self, message_zh: str, message_en: str = None, url: str = None,
                 status_code: int = None, *args):
        """
        Args:
            message_zh: 中文错误消息
            message_en: 英文错误消息（可选）
            url: 请求的 URL（可选）
            status_code: HTTP 状态码（可选）
        """
        super().__init__(message_zh, message_en, *args)
        self.url = url
        self.status_code = status_code


class SiteBlocked(FetchError):
    """触发 CloudFlare 等反爬机制导致被站点封锁"""

    def __init__(self, message_zh: str = None, message_en: str = None, url: str = None, *args):
        if message_zh is None:
            message_zh = "站点封锁"
            message_en = "Site blocked"
        super().__init__(message_zh, message_en, url, 403, *args)


class ParseError(ScraperError):
    """文档完全无法解析（空响应、非 HTML 内容）"""

    def __init__(self, url: str, reason: str = '', *args):
        message_zh = f"无法解析页面: {url}"
        message_en = f"Cannot parse document: {url}"
        if reason:
            message_zh += f" ({reason})"
            message_en += f" ({reason})"
        super().__init__(message_zh, message_en, *args)
        self.url = url


class ResolutionError(ScraperError):
    """无法从请求中得到可用的详情页 URL"""

    def __init__(self, source: str, message_zh: str = None, message_en: str = None, *args):
        """
        Args:
            source: 数据源名称（如 'csfd'）
        """
        message_zh = message_zh or f"{source}: 无法得到可用的影片 URL"
        message_en = message_en or f"{source}: We did not get any useful movie url"
        super().__init__(message_zh, message_en, *args)
        self.source = source


class UnsupportedMediaTypeError(ScraperError):
    """数据源不支持的媒体类型（只支持 movie）"""

    def __init__(self, media_type: str, *args):
        super().__init__(
            f"不支持的媒体类型: {media_type}",
            f"Unsupported media type: {media_type}",
            *args
        )
        self.media_type = media_type

    def __str__(self):
        return self.message_zh
