"""시장 지표 엔드포인트 (환율, 기준금리)"""

from __future__ import annotations

import logging
from dataclasses import replace

import httpx
from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_cache
from app.cache import TTLCache
from app.config import settings
from app.schemas.market import MarketSnapshot
from app.tools.market_api import MarketDataError, fetch_market_snapshot

logger = logging.getLogger("app.market")

router = APIRouter()

_CACHE_KEY = "market:snapshot"


@router.get("")
async def get_market(cache: TTLCache = Depends(get_cache)) -> MarketSnapshot:
    """USD/KRW 환율과 한·미 기준금리를 반환합니다 (1시간 캐시)."""
    cached = cache.get(_CACHE_KEY)
    if cached is not None:
        return cached

    try:
        snapshot = await fetch_market_snapshot()
    except (httpx.HTTPError, MarketDataError) as exc:
        logger.warning("환율 API 호출 실패: %s", exc)
        stale = cache.get_stale(_CACHE_KEY)
        if stale is not None:
            return replace(stale, error="환율 정보를 갱신하지 못했습니다.")
        raise HTTPException(status_code=502, detail="지표 데이터를 불러올 수 없습니다.") from exc

    cache.set(_CACHE_KEY, snapshot, settings.market_cache_ttl_seconds)
    return snapshot
