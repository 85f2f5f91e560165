"""부동산 뉴스 스키마"""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class Article:
    """RSS 기사 항목"""

    title: str
    summary: str
    source: str
    published_at: datetime
    url: str


@dataclass(frozen=True)
class NewsFeed:
    """최근 뉴스 목록"""

    articles: list[Article] = field(default_factory=list)
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    error: str | None = None  # 갱신 실패 시 이전 결과와 함께 전달
