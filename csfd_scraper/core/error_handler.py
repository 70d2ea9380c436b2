"""
错误处理核心模块
提供错误分类、双语消息生成和建议生成
"""

import logging
from typing import Dict, List, Optional, Any
from enum import Enum
from dataclasses import dataclass, field
from datetime import datetime

from ..web.exceptions import (
    ScraperError, FetchError, SiteBlocked, ParseError,
    ResolutionError, UnsupportedMediaTypeError
)


logger = logging.getLogger(__name__)


class ErrorCategory(Enum):
    """错误分类枚举"""
    NETWORK_ERROR = "network_error"
    SITE_BLOCKED = "site_blocked"
    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"
    RESOLUTION_ERROR = "resolution_error"
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    INVALID_INPUT = "invalid_input"
    UNKNOWN = "unknown"


@dataclass
class StructuredError:
    """结构化错误对象（用于 JSON 序列化）"""
    category: ErrorCategory
    source: str
    code: str
    message_zh: str
    message_en: str
    suggestions_zh: List[str] = field(default_factory=list)
    suggestions_en: List[str] = field(default_factory=list)
    http_status: Optional[int] = None
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典（用于 JSON 序列化）"""
        return {
            'category': self.category.value,
            'source': self.source,
            'code': self.code,
            'message': {
                'zh': self.message_zh,
                'en': self.message_en
            },
            'suggestions': {
                'zh': self.suggestions_zh,
                'en': self.suggestions_en
            },
            'http_status': self.http_status,
            'timestamp': self.timestamp.isoformat()
        }


# 各分类的建议（中文, 英文）
_SUGGESTIONS = {
    ErrorCategory.NETWORK_ERROR: (
        ['🔌 检查网络连接', '🔄 稍后重试'],
        ['🔌 Check network connection', '🔄 Try again later'],
    ),
    ErrorCategory.SITE_BLOCKED: (
        ['🚫 CSFD 拒绝了请求', '⚙️ 在设置中启用 cloudscraper 或配置代理'],
        ['🚫 CSFD rejected the request', '⚙️ Enable cloudscraper or configure a proxy'],
    ),
    ErrorCategory.NOT_FOUND: (
        ['🔍 确认 CSFD ID 是否正确', '🔄 尝试重新搜索'],
        ['🔍 Verify the CSFD id', '🔄 Try searching again'],
    ),
    ErrorCategory.PARSE_ERROR: (
        ['⚠️ 页面内容无法解析', '🔄 稍后重试'],
        ['⚠️ Page could not be parsed', '🔄 Try again later'],
    ),
    ErrorCategory.RESOLUTION_ERROR: (
        ['🔍 请提供 CSFD ID 或先搜索影片'],
        ['🔍 Provide a CSFD id or search for the movie first'],
    ),
    ErrorCategory.UNSUPPORTED_MEDIA_TYPE: (
        ['🎬 CSFD 数据源只支持电影'],
        ['🎬 The CSFD provider supports movies only'],
    ),
    ErrorCategory.INVALID_INPUT: (
        ['📋 检查请求参数'],
        ['📋 Check request parameters'],
    ),
    ErrorCategory.UNKNOWN: (
        ['❓ 未知错误', '📋 查看日志了解详情'],
        ['❓ Unknown error', '📋 Check logs for details'],
    ),
}


class ErrorHandler:
    """错误处理器 - 负责错误分类、消息生成和建议生成"""

    def __init__(self, config: Dict[str, Any], logger: logging.Logger = None):
        """
        初始化错误处理器

        Args:
            config: 配置字典
            logger: 日志记录器（可选）
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

    def handle_exception(
        self,
        exception: Exception,
        source: str,
        code: str,
    ) -> StructuredError:
        """
        处理异常，生成结构化错误

        Args:
            exception: 捕获的异常
            source: 数据源名称
            code: 请求的 ID 或搜索词

        Returns:
            StructuredError 对象
        """
        http_status = getattr(exception, 'status_code', None)

        # 1. 错误分类
        category = self.categorize(exception)

        # 2. 获取双语消息
        if isinstance(exception, ScraperError):
            message_zh = exception.message_zh
            message_en = exception.message_en
        else:
            message_zh = str(exception)
            message_en = str(exception)

        # 3. 生成建议
        suggestions_zh, suggestions_en = self.get_suggestions(category)

        # 4. 记录日志
        self._log_error(exception, source, code, category, http_status)

        return StructuredError(
            category=category,
            source=source,
            code=code,
            message_zh=message_zh,
            message_en=message_en,
            suggestions_zh=suggestions_zh,
            suggestions_en=suggestions_en,
            http_status=http_status
        )

    def categorize(self, exception: Exception) -> ErrorCategory:
        """
        错误分类逻辑

        Args:
            exception: 异常对象

        Returns:
            错误分类
        """
        if isinstance(exception, SiteBlocked):
            return ErrorCategory.SITE_BLOCKED
        if isinstance(exception, FetchError):
            if exception.status_code == 404:
                return ErrorCategory.NOT_FOUND
            return ErrorCategory.NETWORK_ERROR
        if isinstance(exception, ParseError):
            return ErrorCategory.PARSE_ERROR
        if isinstance(exception, ResolutionError):
            return ErrorCategory.RESOLUTION_ERROR
        if isinstance(exception, UnsupportedMediaTypeError):
            return ErrorCategory.UNSUPPORTED_MEDIA_TYPE
        return ErrorCategory.UNKNOWN

    @staticmethod
    def get_suggestions(category: ErrorCategory) -> tuple[List[str], List[str]]:
        """返回 (中文建议列表, 英文建议列表)"""
        suggestions_zh, suggestions_en = _SUGGESTIONS.get(category, _SUGGESTIONS[ErrorCategory.UNKNOWN])
        return list(suggestions_zh), list(suggestions_en)

    def _log_error(
        self,
        exception: Exception,
        source: str,
        code: str,
        category: ErrorCategory,
        http_status: Optional[int] = None
    ):
        log_msg = f"[{category.value}] {source}: {code} - {exception}"
        if http_status:
            log_msg += f" (HTTP {http_status})"

        self.logger.error(log_msg)

        # 详细的堆栈跟踪（仅在 DEBUG 模式）
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("Exception details:", exc_info=exception)
