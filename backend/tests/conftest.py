from __future__ import annotations

from collections.abc import AsyncGenerator, Iterator
from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_cache
from app.cache import InMemoryTTLCache
from app.main import app
from app.schemas.deal import NormalizedDeal, PropertyType


@pytest.fixture
def cache() -> Iterator[InMemoryTTLCache]:
    test_cache = InMemoryTTLCache()
    app.dependency_overrides[get_cache] = lambda: test_cache
    yield test_cache
    app.dependency_overrides.pop(get_cache, None)


@pytest_asyncio.fixture
async def client(cache: InMemoryTTLCache) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


def make_deal(
    *,
    price: int = 900_000_000,
    area: float = 84.0,
    contract_date: date = date(2025, 1, 15),
    complex_name: str = "테스트아파트",
    region_name: str = "41480",
    neighborhood: str | None = None,
    road_name: str | None = None,
    deal_id: str = "41480-1",
) -> NormalizedDeal:
    """테스트용 정규화 거래를 생성한다."""
    return NormalizedDeal(
        id=deal_id,
        property_type=PropertyType.APARTMENT,
        complex_name=complex_name,
        area=area,
        contract_date=contract_date,
        price=price,
        price_per_area=price / area if area > 0 else float(price),
        lawd_code="41480",
        region_name=region_name,
        neighborhood=neighborhood,
        road_name=road_name,
        year=contract_date.year,
        month=contract_date.month,
    )
