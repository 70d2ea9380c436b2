"""
Genre 处理器

负责加载 CSFD 的 Genre 映射表（捷克语 -> 规范 Genre），并把页面上的 Genre 行翻译为规范 Genre 列表

映射表是数据（config/genre_csfd.csv），不是代码：
- genre 列为空表示"已知但有意不映射"的标签（如 IMAX）
- 多个捷克语标签可以映射到同一个 Genre
"""

import csv
import os
from typing import List, Dict, Optional
import logging

from ..core.genres import Genre


class GenreProcessor:
    """
    Genre 处理器，用于加载映射表并进行 Genre 翻译

    匹配是精确匹配（区分大小写），调用方负责按 " / " 拆分 Genre 行
    """

    # Genre 行的分隔符
    SEPARATOR = ' / '

    def __init__(self, config_dir: str = None, map_file: str = 'genre_csfd.csv'):
        """
        初始化 Genre 处理器

        Args:
            config_dir: 配置文件目录路径，默认为插件根目录下的 config
            map_file: 映射表文件名
        """
        self.logger = logging.getLogger(__name__)

        if config_dir is None:
            current_dir = os.path.dirname(os.path.abspath(__file__))
            config_dir = os.path.join(os.path.dirname(current_dir), 'config')

        self.config_dir = config_dir

        # 捷克语标签 -> 规范 Genre（None 表示有意不映射）
        self.genre_map: Dict[str, Optional[Genre]] = {}

        filepath = os.path.join(self.config_dir, map_file)
        if os.path.exists(filepath):
            self.genre_map = self._load_map(filepath)
            self.logger.debug(f"已加载 CSFD 的 Genre 映射表，共 {len(self.genre_map)} 条")
        else:
            self.logger.warning(f"映射表文件不存在: {filepath}")

    def _load_map(self, filepath: str) -> Dict[str, Optional[Genre]]:
        """
        加载映射表文件

        格式: cs, genre, note

        Args:
            filepath: CSV 文件路径

        Returns:
            映射字典 {捷克语标签: Genre 或 None}
        """
        genre_map = {}

        try:
            with open(filepath, 'r', encoding='utf-8-sig', newline='') as csvfile:
                reader = csv.DictReader(csvfile)

                for row in reader:
                    label = (row['cs'] or '').strip()
                    if not label:
                        continue

                    genre_name = (row['genre'] or '').strip()
                    if not genre_name:
                        genre_map[label] = None
                        continue

                    try:
                        genre_map[label] = Genre[genre_name]
                    except KeyError:
                        self.logger.error(f"映射表中的 Genre 不存在: {label} -> {genre_name}")

        except UnicodeDecodeError:
            self.logger.error(f'CSV 文件必须以 UTF-8 编码保存: {filepath}')
            raise
        except KeyError as e:
            self.logger.error(f"CSV 文件缺少必要的列: {e}")
            raise

        return genre_map

    def translate(self, label: str) -> Optional[Genre]:
        """
        翻译单个 Genre 标签

        Args:
            label: 捷克语 Genre 标签（已拆分）

        Returns:
            规范 Genre；有意不映射或未知的标签返回 None
        """
        return self.genre_map.get(label)

    def is_known(self, label: str) -> bool:
        """标签是否在映射表中（包括有意不映射的标签）"""
        return label in self.genre_map

    def process_genre_line(self, genre_line: str) -> List[Genre]:
        """
        处理一行 Genre 文本（如 "Drama / Sci-Fi"）

        每个标签先查映射表，查不到再用通用查找兜底；两者都查不到的标签被丢弃

        Args:
            genre_line: Genre 行

        Returns:
            规范 Genre 列表（保持顺序，不去重）
        """
        genres = []
        if not genre_line:
            return genres

        for label in genre_line.split(self.SEPARATOR):
            genre = self.translate(label)
            if genre is None:
                genre = Genre.lookup(label)
            if genre is None:
                self.logger.debug(f"无法映射 Genre: {label}")
                continue
            genres.append(genre)

        return genres

    def get_map_size(self) -> int:
        """获取映射表大小"""
        return len(self.genre_map)
