"""환율(USD/KRW) 조회 + 기준금리 참고값"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import httpx

from app.config import settings
from app.data.market_reference import KOREA_BASE_RATE, US_BASE_RATE
from app.schemas.market import MarketIndicator, MarketSnapshot

logger = logging.getLogger(__name__)

FX_SOURCE = "exchangerate.host"


class MarketDataError(Exception):
    """환율 API 응답을 해석할 수 없는 경우 (HTML 오류 페이지, 환율 누락 등)"""


def parse_fx_response(payload: dict) -> tuple[float, datetime]:
    """환율 API 응답에서 (USD/KRW, 기준 시각)을 꺼낸다.

    Raises:
        MarketDataError: 실패 응답이거나 KRW 환율이 없는 경우
    """
    if not isinstance(payload, dict):
        raise MarketDataError(f"환율 API 응답 형식 오류: {type(payload).__name__}")
    if payload.get("success") is False:
        raise MarketDataError(f"환율 API 실패 응답: {payload.get('error')}")
    rates = payload.get("rates")
    try:
        rate = float(rates.get("KRW") or 0) if isinstance(rates, dict) else 0.0
    except (TypeError, ValueError):
        rate = 0.0
    if rate <= 0:
        raise MarketDataError("환율 API 응답에 USD/KRW 값이 없습니다.")
    updated_at = datetime.now(timezone.utc)
    raw_date = payload.get("date")
    if raw_date:
        try:
            updated_at = datetime.fromisoformat(raw_date).replace(tzinfo=timezone.utc)
        except ValueError:
            logger.debug("환율 기준일 형식 오류: %s", raw_date)
    return rate, updated_at


async def fetch_market_snapshot(
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> MarketSnapshot:
    """USD/KRW 환율을 조회해 기준금리 참고값과 함께 반환한다.

    Raises:
        httpx.HTTPError: 환율 API 호출 실패
        MarketDataError: 응답을 해석할 수 없는 경우
    """
    async with httpx.AsyncClient(
        timeout=settings.request_timeout_seconds, transport=transport
    ) as client:
        response = await client.get(settings.fx_api_url)
        response.raise_for_status()

    try:
        payload = response.json()
    except ValueError as exc:
        raise MarketDataError(f"환율 API JSON 파싱 실패: {exc}") from exc
    usd_krw, updated_at = parse_fx_response(payload)
    logger.debug("환율 조회: USD/KRW=%.2f (%s)", usd_krw, updated_at.date())

    return MarketSnapshot(
        korea_base_rate=KOREA_BASE_RATE,
        us_base_rate=US_BASE_RATE,
        usd_krw=MarketIndicator(label="USD / KRW", value=usd_krw, source=FX_SOURCE),
        updated_at=updated_at,
    )
