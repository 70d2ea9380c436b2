"""
规范 Genre 枚举
与宿主程序共享的封闭 Genre 集合，以及通用的 Genre 查找（翻译表未命中时的兜底）
"""

import re
from enum import Enum
from typing import Optional


class Genre(Enum):
    """宿主程序识别的规范 Genre（值为英文显示名）"""
    ACTION = "Action"
    ADVENTURE = "Adventure"
    ANIMATION = "Animation"
    ANIMAL = "Animal"
    ANIME = "Anime"
    BIOGRAPHY = "Biography"
    COMEDY = "Comedy"
    CRIME = "Crime"
    DISASTER = "Disaster"
    DOCUMENTARY = "Documentary"
    DRAMA = "Drama"
    EASTERN = "Eastern"
    EROTIC = "Erotic"
    FAMILY = "Family"
    FAN_FILM = "Fan Film"
    FANTASY = "Fantasy"
    FILM_NOIR = "Film Noir"
    FOREIGN = "Foreign"
    GAME_SHOW = "Game Show"
    HISTORY = "History"
    HOLIDAY = "Holiday"
    HORROR = "Horror"
    INDIE = "Indie"
    MUSIC = "Music"
    MUSICAL = "Musical"
    MYSTERY = "Mystery"
    NEO_NOIR = "Neo Noir"
    NEWS = "News"
    REALITY_TV = "Reality TV"
    ROAD_MOVIE = "Road Movie"
    ROMANCE = "Romance"
    SCIENCE_FICTION = "Science Fiction"
    SERIES = "Series"
    SHORT = "Short"
    SILENT_MOVIE = "Silent Movie"
    SPORT = "Sport"
    SPORTING_EVENT = "Sporting Event"
    SPORTS_FILM = "Sports Film"
    SUSPENSE = "Suspense"
    TALK_SHOW = "Talk Show"
    THRILLER = "Thriller"
    TV_MOVIE = "TV Movie"
    WAR = "War"
    WESTERN = "Western"

    @staticmethod
    def _normalize(label: str) -> str:
        return re.sub(r'[\s_\-]+', ' ', label).strip().lower()

    @classmethod
    def lookup(cls, label: str) -> Optional['Genre']:
        """
        尽力而为的 Genre 查找：按枚举名或英文显示名匹配（大小写、空格、连字符不敏感）

        Args:
            label: 任意 Genre 文本

        Returns:
            匹配的 Genre，找不到返回 None
        """
        if not label:
            return None

        key = cls._normalize(label)
        for genre in cls:
            if key == cls._normalize(genre.name) or key == cls._normalize(genre.value):
                return genre
        return None
