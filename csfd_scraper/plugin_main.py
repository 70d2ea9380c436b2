#!/usr/bin/env python3
"""
CSFD Scraper Plugin - 主入口
通过 stdin/stdout 与主程序通信（每行一个 JSON 请求 / 响应）
"""

import sys
import json
import logging
import io
from typing import Dict, Any, Optional, TextIO

from . import __version__
from .core.config_loader import load_config
from .core.error_handler import ErrorHandler, ErrorCategory, StructuredError
from .core.models import ScrapeOptions
from .managers.provider_registry import (
    ProviderRegistry,
    create_default_registry,
    CAPABILITY_METADATA,
    CAPABILITY_SEARCH,
    CAPABILITY_ARTWORK,
)


class PluginMain:
    """插件主入口"""

    def __init__(self, config: Optional[Dict[str, Any]] = None, registry: Optional[ProviderRegistry] = None):
        """
        初始化插件

        Args:
            config: 配置字典（可选，默认从 config.yml 加载）
            registry: 数据源注册表（可选，默认按配置构建）
        """
        self.config = config if config is not None else load_config()

        # 设置日志（写入文件，避免干扰 stdout）
        self._setup_logging()

        self.registry = registry or create_default_registry(self.config)
        self.error_handler = ErrorHandler(self.config, self.logger)

        self.logger.info("Plugin initialized")

    def _setup_logging(self):
        """设置日志"""
        log_config = self.config.get('logging', {})
        log_level = log_config.get('level', 'INFO')
        log_file = log_config.get('log_file')
        log_format = log_config.get('format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        if log_file:
            logging.basicConfig(
                level=getattr(logging, log_level, logging.INFO),
                format=log_format,
                filename=log_file,
                filemode='a',
                encoding='utf-8'
            )
        else:
            logging.basicConfig(
                level=getattr(logging, log_level, logging.INFO),
                format=log_format,
                stream=sys.stderr
            )

        self.logger = logging.getLogger(__name__)

    def run(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        """运行插件主循环"""
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        self.logger.info("Plugin started")

        try:
            for line in stdin:
                line = line.strip()
                if not line:
                    continue

                try:
                    request = json.loads(line)
                    self.logger.debug(f"Received request: {request}")
                    response = self.handle_request(request)

                except json.JSONDecodeError as e:
                    self.logger.error(f"JSON decode error: {e}")
                    response = self._invalid_input(f"无效的 JSON: {e}", f"Invalid JSON: {e}")

                except Exception as e:
                    self.logger.exception(f"Unexpected error: {e}")
                    error = self.error_handler.handle_exception(e, 'csfd_scraper', '')
                    response = {'success': False, 'error': error.to_dict()}

                print(json.dumps(response, ensure_ascii=False), file=stdout)
                stdout.flush()

        except KeyboardInterrupt:
            self.logger.info("Plugin interrupted by user")

        finally:
            self.logger.info("Plugin stopped")

    def handle_request(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """
        处理请求

        Args:
            request: 请求字典，包含 action 字段

        Returns:
            响应字典
        """
        if not isinstance(request, dict):
            return self._invalid_input('请求必须是 JSON 对象', 'Request must be a JSON object')

        action = request.get('action')

        if action == 'info':
            return self._handle_info()
        elif action == 'get':
            return self._handle_get(request)
        elif action == 'search':
            return self._handle_search(request)
        elif action == 'artwork':
            return self._handle_artwork(request)
        else:
            return self._invalid_input(f"未知的 action: {action}", f"Unknown action: {action}")

    def _handle_info(self) -> Dict[str, Any]:
        """返回插件和各数据源的信息"""
        return {
            'success': True,
            'data': {
                'id': 'csfd_scraper',
                'name': 'CSFD Scraper',
                'version': __version__,
                'description': 'Metadata and artwork scraper for csfd.cz',
                'providers': self.registry.describe(),
                'supports_search': self.registry.find(CAPABILITY_SEARCH) is not None,
            }
        }

    def _handle_get(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """
        刮削单部影片

        Args:
            request: 请求字典，包含：
                - provider: 数据源 ID（可选，默认第一个支持 metadata 的数据源）
                - ids: 各数据源的 ID（如 {"csfd": "19977", "imdb": "tt0063442"}）
                - result: 上次搜索返回的结果（可选）
                - media_type: 媒体类型（默认 movie）

        Returns:
            {'success': True, 'data': {...}} 或错误响应
        """
        entry = self.registry.find(CAPABILITY_METADATA, request.get('provider'))
        if entry is None:
            return self._invalid_input(
                f"数据源不支持刮削: {request.get('provider')}",
                f"Provider does not support metadata: {request.get('provider')}"
            )

        options = ScrapeOptions.from_request(request)
        code = self._describe_request(options)
        self.logger.info(f"Scraping: {code}")

        try:
            md = entry.capabilities[CAPABILITY_METADATA](options)
        except Exception as e:
            error = self.error_handler.handle_exception(e, entry.info.id, code)
            return {'success': False, 'error': error.to_dict()}

        self.logger.info(f"Scrape success: {code} -> {md.title}")
        return {
            'success': True,
            'data': md.to_dict()
        }

    def _handle_search(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """
        搜索影片（搜索本身从不抛异常，失败时返回空列表）

        Args:
            request: 请求字典，包含 query、year（可选）、media_type（可选）、provider（可选）
        """
        query = request.get('query') or ''
        if not str(query).strip():
            return self._invalid_input('缺少 query 参数', 'Missing query parameter')

        entry = self.registry.find(CAPABILITY_SEARCH, request.get('provider'))
        if entry is None:
            return self._invalid_input(
                f"数据源不支持搜索: {request.get('provider')}",
                f"Provider does not support search: {request.get('provider')}"
            )

        year = request.get('year')
        year = str(year) if year not in (None, '') else None

        results = entry.capabilities[CAPABILITY_SEARCH](
            str(query), year, request.get('media_type') or 'movie'
        )
        self.logger.info(f"Search: {query} ({year}) -> {len(results)} 个结果")

        return {
            'success': True,
            'total_count': len(results),
            'results': [r.to_dict() for r in results]
        }

    def _handle_artwork(self, request: Dict[str, Any]) -> Dict[str, Any]:
        """获取影片图库"""
        entry = self.registry.find(CAPABILITY_ARTWORK, request.get('provider'))
        if entry is None:
            return self._invalid_input(
                f"数据源不支持图库: {request.get('provider')}",
                f"Provider does not support artwork: {request.get('provider')}"
            )

        options = ScrapeOptions.from_request(request)
        code = self._describe_request(options)

        try:
            artworks = entry.capabilities[CAPABILITY_ARTWORK](options)
        except Exception as e:
            error = self.error_handler.handle_exception(e, entry.info.id, code)
            return {'success': False, 'error': error.to_dict()}

        return {
            'success': True,
            'total_count': len(artworks),
            'results': [a.to_dict() for a in artworks]
        }

    @staticmethod
    def _describe_request(options: ScrapeOptions) -> str:
        """用于日志和错误消息的请求描述"""
        if options.ids:
            return ', '.join(f"{k}={v}" for k, v in sorted(options.ids.items()))
        if options.result is not None:
            return options.result.url or options.result.title
        return '<empty>'

    def _invalid_input(self, message_zh: str, message_en: str) -> Dict[str, Any]:
        suggestions_zh, suggestions_en = ErrorHandler.get_suggestions(ErrorCategory.INVALID_INPUT)
        error = StructuredError(
            category=ErrorCategory.INVALID_INPUT,
            source='csfd_scraper',
            code='',
            message_zh=message_zh,
            message_en=message_en,
            suggestions_zh=suggestions_zh,
            suggestions_en=suggestions_en,
        )
        return {'success': False, 'error': error.to_dict()}


def main():
    """主函数"""
    # 设置 stdin/stdout 为 UTF-8 编码
    sys.stdin = io.TextIOWrapper(sys.stdin.buffer, encoding='utf-8')
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', line_buffering=True)

    plugin = PluginMain()
    plugin.run()


if __name__ == '__main__':
    main()
