"""Google News RSS 부동산 뉴스 수집"""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
import xml.etree.ElementTree as ET

import httpx

from app.config import settings
from app.schemas.news import Article

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/119 Safari/537.36"
)


@dataclass(frozen=True)
class FeedSource:
    url: str
    label: str


RSS_SOURCES: tuple[FeedSource, ...] = (
    FeedSource(
        url="https://news.google.com/rss/search?q=%EC%9A%B4%EC%A0%95%20%EB%B6%80%EB%8F%99%EC%82%B0&hl=ko&gl=KR&ceid=KR:ko",
        label="Google News · 운정",
    ),
    FeedSource(
        url="https://news.google.com/rss/search?q=%EB%B6%80%EB%8F%99%EC%82%B0%20%EA%B8%88%EB%A6%AC&hl=ko&gl=KR&ceid=KR:ko",
        label="Google News · 금리",
    ),
)


def strip_html(text: str | None) -> str:
    """HTML 태그와 &nbsp;를 제거하고 공백을 정리한다."""
    if not text:
        return ""
    text = re.sub(r"<[^>]+>", " ", text).replace("&nbsp;", " ")
    return re.sub(r"\s+", " ", text).strip()


def _parse_pub_date(raw: str | None, fallback: datetime) -> datetime:
    """RFC 822 (RSS) 또는 ISO 8601 날짜를 UTC datetime으로 변환한다."""
    if not raw:
        return fallback
    try:
        parsed = parsedate_to_datetime(raw)
    except (TypeError, ValueError):
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            return fallback
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_rss(xml_text: str, fallback_source: str, *, now: datetime | None = None) -> list[Article]:
    """RSS XML을 Article 리스트로 변환한다.

    Raises:
        ET.ParseError: XML이 아닌 응답
    """
    now = now or datetime.now(timezone.utc)
    root = ET.fromstring(xml_text)

    articles: list[Article] = []
    for item in root.iter("item"):
        title = (item.findtext("title") or "").strip() or "제목 미확인"
        summary = strip_html(item.findtext("description"))
        source = (item.findtext("source") or "").strip() or fallback_source
        published = item.findtext("pubDate") or item.findtext("published")
        articles.append(
            Article(
                title=title,
                summary=summary or title,
                source=source,
                published_at=_parse_pub_date(published, now),
                url=(item.findtext("link") or "").strip() or "#",
            )
        )
    return articles


async def fetch_feed(client: httpx.AsyncClient, source: FeedSource) -> list[Article]:
    response = await client.get(source.url, headers={"User-Agent": USER_AGENT})
    response.raise_for_status()
    return parse_rss(response.text, source.label)


async def collect_news(
    *,
    now: datetime | None = None,
    sources: tuple[FeedSource, ...] = RSS_SOURCES,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[Article]:
    """모든 피드를 병렬로 수집해 최근 N일 기사만 최신순으로 반환한다.

    일부 피드가 실패해도 나머지 결과는 사용한다. 전부 실패하면 예외를 다시 던진다.
    """
    now = now or datetime.now(timezone.utc)
    window = timedelta(days=settings.news_window_days)

    async with httpx.AsyncClient(
        timeout=settings.request_timeout_seconds, transport=transport, follow_redirects=True
    ) as client:
        results = await asyncio.gather(
            *[fetch_feed(client, source) for source in sources],
            return_exceptions=True,
        )

    articles: list[Article] = []
    failures: list[BaseException] = []
    for source, result in zip(sources, results):
        if isinstance(result, BaseException):
            logger.warning("RSS 수집 실패 [%s]: %s", source.label, result)
            failures.append(result)
            continue
        articles.extend(result)

    if sources and len(failures) == len(sources):
        raise failures[0]

    recent = [a for a in articles if now - a.published_at <= window]
    recent.sort(key=lambda a: a.published_at, reverse=True)
    logger.debug("뉴스 수집: 전체 %d건, 최근 %d일 %d건", len(articles), window.days, len(recent))
    return recent[: settings.news_max_articles]
