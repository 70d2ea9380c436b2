"""
核心数据模型
包含刮削器、解析器和插件入口共用的数据结构
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional, List

from .genres import Genre


class CastType(Enum):
    """演职员类型"""
    DIRECTOR = "director"
    WRITER = "writer"
    ACTOR = "actor"
    OTHER = "other"


class ArtworkType(Enum):
    """图片类型"""
    POSTER = "poster"
    BACKGROUND = "background"


@dataclass(frozen=True)
class ProviderInfo:
    """
    数据源身份（进程启动时构建一次，之后不可变）

    字段：
        id: 稳定的数据源 ID（如 'csfd'）
        name: 显示名
        description: 描述（HTML 片段，宿主程序直接显示）
        icon: 图标资源名
        version: 插件版本
    """
    id: str
    name: str
    description: str
    icon: Optional[str] = None
    version: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'icon': self.icon,
            'version': self.version,
        }


@dataclass(frozen=True)
class CastEntry:
    """演职员（构建后不可变）"""
    name: str
    role: CastType = CastType.OTHER

    def to_dict(self) -> Dict[str, Any]:
        return {'name': self.name, 'role': self.role.value}


@dataclass(frozen=True)
class FieldIssue:
    """
    单个字段的提取问题（以返回值的形式传递，不抛出）

    字段：
        field: 字段名（title/genre/rating/plot/poster/cast）
        reason: 问题描述
        structural: True 表示页面结构不符合预期（缺少容器等），
                    False 表示结构正常但内容无法使用（如评分不是数字）
    """
    field: str
    reason: str
    structural: bool = True

    def __str__(self):
        kind = 'structure' if self.structural else 'value'
        return f"[{self.field}/{kind}] {self.reason}"


@dataclass
class MetadataRecord:
    """
    影片元数据（每次刮削新建，由提取器逐字段填充）

    字段：
        provider_id: 数据源 ID
        ids: 各数据源的 ID（如 {'csfd': '19977'}）
        title: 本地标题
        original_title: 原始标题
        year: 年份（4 位数字字符串）
        genres: 规范 Genre 列表（保持页面顺序，允许重复）
        rating: 评分（0.0 - 10.0）
        vote_count: 投票数
        plot: 简介
        poster_url: 海报 URL（绝对地址）
        cast: 演职员列表
    """
    provider_id: str = ""
    ids: Dict[str, str] = field(default_factory=dict)
    title: str = ""
    original_title: Optional[str] = None
    year: Optional[str] = None
    genres: List[Genre] = field(default_factory=list)
    rating: Optional[float] = None
    vote_count: Optional[int] = None
    plot: Optional[str] = None
    poster_url: Optional[str] = None
    cast: List[CastEntry] = field(default_factory=list)

    def add_genre(self, genre: Genre):
        self.genres.append(genre)

    def add_cast_member(self, member: CastEntry):
        self.cast.append(member)

    def get_cast_members(self, role: CastType) -> List[CastEntry]:
        """按类型筛选演职员（保持原顺序）"""
        return [m for m in self.cast if m.role == role]

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典（用于 JSON 序列化）"""
        return {
            'provider_id': self.provider_id,
            'ids': dict(self.ids),
            'title': self.title,
            'original_title': self.original_title,
            'year': self.year,
            'genres': [g.name for g in self.genres],
            'rating': self.rating,
            'vote_count': self.vote_count,
            'plot': self.plot,
            'poster_url': self.poster_url,
            'cast': [m.to_dict() for m in self.cast],
        }


@dataclass
class SearchCandidate:
    """
    搜索结果（搜索结果页的一个条目）

    score 在排序前可修改（年份不符时降分），返回给调用方后不再修改
    """
    provider_id: str = ""
    id: Optional[str] = None
    title: str = ""
    year: Optional[str] = None
    poster_url: Optional[str] = None
    url: str = ""
    media_type: str = "movie"
    score: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'provider_id': self.provider_id,
            'id': self.id,
            'title': self.title,
            'year': self.year,
            'poster_url': self.poster_url,
            'url': self.url,
            'media_type': self.media_type,
            'score': self.score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearchCandidate':
        """从宿主程序回传的字典还原（用于按上次搜索结果刮削）"""
        return cls(
            provider_id=data.get('provider_id') or "",
            id=data.get('id'),
            title=data.get('title') or "",
            year=data.get('year'),
            poster_url=data.get('poster_url'),
            url=data.get('url') or "",
            media_type=data.get('media_type') or "movie",
            score=float(data.get('score') or 0.0),
        )


@dataclass
class ArtworkEntry:
    """图库中的一张图片"""
    type: ArtworkType
    url: str
    preview_url: str
    provider_id: str = ""
    width: Optional[int] = None
    height: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type.value,
            'url': self.url,
            'preview_url': self.preview_url,
            'provider_id': self.provider_id,
            'width': self.width,
            'height': self.height,
        }


@dataclass
class ScrapeOptions:
    """
    刮削请求参数

    字段：
        media_type: 媒体类型（只支持 'movie'）
        ids: 各数据源的 ID（如 {'csfd': '19977', 'imdb': 'tt0063442'}）
        result: 上次搜索返回的结果（可选）
    """
    media_type: str = "movie"
    ids: Dict[str, str] = field(default_factory=dict)
    result: Optional[SearchCandidate] = None

    def get_id(self, provider_id: str) -> Optional[str]:
        """获取指定数据源的 ID（空白视为没有）"""
        value = self.ids.get(provider_id)
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @classmethod
    def from_request(cls, request: Dict[str, Any]) -> 'ScrapeOptions':
        """从插件协议的请求字典构建"""
        result = request.get('result')
        return cls(
            media_type=request.get('media_type') or "movie",
            ids={k: str(v) for k, v in (request.get('ids') or {}).items() if v is not None},
            result=SearchCandidate.from_dict(result) if isinstance(result, dict) else None,
        )
