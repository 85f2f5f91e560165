"""Tests for Task-00: Infrastructure (health, 실거래/지표/뉴스/대출 API 라우트)."""

from __future__ import annotations

from datetime import date, datetime, timezone
from functools import partial
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from httpx import AsyncClient

from app.cache import InMemoryTTLCache
from app.data.regions import DEFAULT_REGION, find_region
from app.deals.errors import EmptyUpstreamError, NoQualifyingDealsError, UpstreamRequestError
from app.deals.summary import summarize_deals
from app.schemas.deal import DealsResult, PropertyType
from app.schemas.market import MarketIndicator, MarketSnapshot
from app.schemas.news import Article
from app.tools.market_api import fetch_market_snapshot

from conftest import make_deal

pytestmark = pytest.mark.asyncio


def _deals_result(*prices: int) -> DealsResult:
    deals = [
        make_deal(price=price, contract_date=date(2025, 3, 20 - i), deal_id=f"41480-{i}")
        for i, price in enumerate(prices)
    ]
    return DealsResult(
        deals=deals,
        summary=summarize_deals(deals),
        region_code="41480",
        year_month="202503",
        property_type=PropertyType.APARTMENT,
        fetched_total=len(deals),
    )


def _snapshot(usd_krw: float = 1380.0) -> MarketSnapshot:
    return MarketSnapshot(
        korea_base_rate=MarketIndicator("한국은행 기준금리", 3.5, "한국은행"),
        us_base_rate=MarketIndicator("미국 연준 기준금리", 5.25, "FOMC"),
        usd_krw=MarketIndicator("USD / KRW", usd_krw, "exchangerate.host"),
    )


# ---------------------------------------------------------------------------
# T-1: health
# ---------------------------------------------------------------------------

async def test_health(client: AsyncClient) -> None:
    resp = await client.get("/api/v1/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert "molit_api" in data


# ---------------------------------------------------------------------------
# T-2: 실거래 조회
# ---------------------------------------------------------------------------

async def test_get_deals(client: AsyncClient) -> None:
    mock_fetch = AsyncMock(return_value=_deals_result(1_000_000_000, 950_000_000))
    with patch("app.api.v1.deals.fetch_deals", mock_fetch):
        resp = await client.get("/api/v1/deals", params={"region": "41480", "year_month": "202503"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["property_type"] == "apartment"
    assert data["source"] == "api"
    assert [d["price"] for d in data["deals"]] == [1_000_000_000, 950_000_000]
    assert data["summary"]["total_deals"] == 2
    assert data["summary"]["latest_price"] == 1_000_000_000
    assert mock_fetch.await_args.args[:3] == ("41480", "202503", PropertyType.APARTMENT)


async def test_get_deals_default_region(client: AsyncClient) -> None:
    mock_fetch = AsyncMock(return_value=_deals_result(900_000_000))
    with patch("app.api.v1.deals.fetch_deals", mock_fetch):
        resp = await client.get("/api/v1/deals", params={"year_month": "202503"})

    assert resp.status_code == 200
    assert mock_fetch.await_args.args[0] == DEFAULT_REGION.code


async def test_get_deals_invalid_params(client: AsyncClient) -> None:
    resp = await client.get("/api/v1/deals", params={"region": "paju"})
    assert resp.status_code == 422

    resp = await client.get("/api/v1/deals", params={"property_type": "villa"})
    assert resp.status_code == 422


async def test_get_deals_loan_eligible_only(client: AsyncClient) -> None:
    mock_fetch = AsyncMock(return_value=_deals_result(1_000_000_000, 850_000_000))
    with patch("app.api.v1.deals.fetch_deals", mock_fetch):
        resp = await client.get("/api/v1/deals", params={"loan_eligible_only": "true"})

    assert resp.status_code == 200
    data = resp.json()
    assert [d["price"] for d in data["deals"]] == [850_000_000]
    assert data["summary"]["total_deals"] == 1


async def test_get_deals_loan_eligible_only_none_left(client: AsyncClient) -> None:
    mock_fetch = AsyncMock(return_value=_deals_result(1_000_000_000))
    with patch("app.api.v1.deals.fetch_deals", mock_fetch):
        resp = await client.get("/api/v1/deals", params={"loan_eligible_only": "true"})

    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "no_qualifying_deals"


# ---------------------------------------------------------------------------
# T-3: 실패 유형별 HTTP 상태
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    ("error", "status_code", "code"),
    [
        (EmptyUpstreamError(), 404, "empty_upstream"),
        (NoQualifyingDealsError(), 404, "no_qualifying_deals"),
        (UpstreamRequestError("국토부 API 호출 실패: HTTP 500"), 502, "upstream_request"),
    ],
)
async def test_get_deals_errors(client: AsyncClient, error, status_code: int, code: str) -> None:
    with patch("app.api.v1.deals.fetch_deals", AsyncMock(side_effect=error)):
        resp = await client.get("/api/v1/deals")

    assert resp.status_code == status_code
    detail = resp.json()["detail"]
    assert detail["code"] == code
    assert detail["message"]


async def test_get_deals_mock_mode(client: AsyncClient) -> None:
    with patch("app.deals.service.settings") as mock_settings:
        mock_settings.molit_api_key = ""
        resp = await client.get("/api/v1/deals")

    assert resp.status_code == 200
    data = resp.json()
    assert data["source"] == "mock"
    assert data["summary"]["total_deals"] == len(data["deals"]) > 0


async def test_get_regions(client: AsyncClient) -> None:
    resp = await client.get("/api/v1/deals/regions")
    assert resp.status_code == 200
    codes = [r["code"] for r in resp.json()]
    assert "41480" in codes
    assert all(len(code) == 5 for code in codes)


async def test_find_region() -> None:
    assert find_region("41480").short_label == "파주시"
    assert find_region("99999") is None
    assert DEFAULT_REGION.code == "41480"


# ---------------------------------------------------------------------------
# T-4: 시장 지표 (캐시 / 장애 시 이전 값)
# ---------------------------------------------------------------------------

async def test_get_market_cached(client: AsyncClient) -> None:
    mock_fetch = AsyncMock(return_value=_snapshot())
    with patch("app.api.v1.market.fetch_market_snapshot", mock_fetch):
        first = await client.get("/api/v1/market")
        second = await client.get("/api/v1/market")

    assert first.status_code == second.status_code == 200
    assert first.json()["usd_krw"]["value"] == 1380.0
    assert mock_fetch.await_count == 1


async def test_get_market_stale_on_failure(client: AsyncClient, cache: InMemoryTTLCache) -> None:
    cache.set("market:snapshot", _snapshot(1400.0), ttl_seconds=-1)

    failing = AsyncMock(side_effect=httpx.ConnectError("down"))
    with patch("app.api.v1.market.fetch_market_snapshot", failing):
        resp = await client.get("/api/v1/market")

    assert resp.status_code == 200
    data = resp.json()
    assert data["usd_krw"]["value"] == 1400.0
    assert data["error"]


async def test_get_market_html_body_falls_back(client: AsyncClient, cache: InMemoryTTLCache) -> None:
    html_page = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>error</html>"))
    fetch_with_html = partial(fetch_market_snapshot, transport=html_page)

    with patch("app.api.v1.market.fetch_market_snapshot", fetch_with_html):
        resp = await client.get("/api/v1/market")
    assert resp.status_code == 502

    cache.set("market:snapshot", _snapshot(1400.0), ttl_seconds=-1)
    with patch("app.api.v1.market.fetch_market_snapshot", fetch_with_html):
        resp = await client.get("/api/v1/market")
    assert resp.status_code == 200
    assert resp.json()["usd_krw"]["value"] == 1400.0
    assert resp.json()["error"]


async def test_get_market_failure_without_cache(client: AsyncClient) -> None:
    failing = AsyncMock(side_effect=httpx.ConnectError("down"))
    with patch("app.api.v1.market.fetch_market_snapshot", failing):
        resp = await client.get("/api/v1/market")

    assert resp.status_code == 502


# ---------------------------------------------------------------------------
# T-5: 뉴스
# ---------------------------------------------------------------------------

async def test_get_news(client: AsyncClient) -> None:
    article = Article(
        title="운정신도시 거래량 회복",
        summary="요약",
        source="연합뉴스",
        published_at=datetime(2025, 6, 20, tzinfo=timezone.utc),
        url="https://news.example.com/1",
    )
    mock_collect = AsyncMock(return_value=[article])
    with patch("app.api.v1.news.collect_news", mock_collect):
        first = await client.get("/api/v1/news")
        second = await client.get("/api/v1/news")

    assert first.status_code == 200
    assert first.json()["articles"][0]["title"] == "운정신도시 거래량 회복"
    assert second.json() == first.json()
    assert mock_collect.await_count == 1


async def test_get_news_failure(client: AsyncClient) -> None:
    failing = AsyncMock(side_effect=httpx.ReadTimeout("timeout"))
    with patch("app.api.v1.news.collect_news", failing):
        resp = await client.get("/api/v1/news")

    assert resp.status_code == 502


# ---------------------------------------------------------------------------
# T-6: 대출 참고 정보
# ---------------------------------------------------------------------------

async def test_get_finance(client: AsyncClient) -> None:
    resp = await client.get("/api/v1/finance")
    assert resp.status_code == 200
    data = resp.json()
    assert data["price_cap"] == 900_000_000
    assert data["loan_points"][0]["label"] == "대출 한도"
    assert len(data["required_documents"]) == 4
