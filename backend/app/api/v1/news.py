"""부동산 뉴스 엔드포인트"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import replace

import httpx
from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_cache
from app.cache import TTLCache
from app.config import settings
from app.schemas.news import NewsFeed
from app.tools.news_feed import collect_news

logger = logging.getLogger("app.news")

router = APIRouter()

_CACHE_KEY = "news:feed"


@router.get("")
async def get_news(cache: TTLCache = Depends(get_cache)) -> NewsFeed:
    """최근 7일 운정·금리 관련 기사를 최신순으로 반환합니다 (30분 캐시)."""
    cached = cache.get(_CACHE_KEY)
    if cached is not None:
        return cached

    try:
        articles = await collect_news()
    except (httpx.HTTPError, ET.ParseError) as exc:
        logger.warning("뉴스 수집 실패: %s", exc)
        stale = cache.get_stale(_CACHE_KEY)
        if stale is not None:
            return replace(stale, error="뉴스 정보를 갱신하지 못했습니다.")
        raise HTTPException(status_code=502, detail="뉴스 정보를 불러오지 못했습니다.") from exc

    feed = NewsFeed(articles=articles)
    cache.set(_CACHE_KEY, feed, settings.news_cache_ttl_seconds)
    return feed
