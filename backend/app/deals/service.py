"""실거래 조회 오케스트레이션

국토부 API 호출 → 정규화 → 지역/면적 필터 → 요약 통계.
정규화/필터/요약은 순수 함수이며, 캐시와 API 호출만 이 모듈에서 다룬다.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from datetime import date

from app.cache import TTLCache
from app.config import settings
from app.data.complex_metadata import COMPLEX_METADATA, ComplexMetadata
from app.deals.errors import EmptyUpstreamError
from app.deals.filters import FilterConfig, filter_deals
from app.deals.formatting import format_area, format_korean_price, percent_label
from app.deals.mock import build_mock_deals
from app.deals.normalizer import normalize_deals
from app.deals.summary import sort_by_contract_date_desc, summarize_deals
from app.schemas.deal import DealsResult, PropertyType, RawRecord
from app.tools import molit_api

logger = logging.getLogger(__name__)

RawFetcher = Callable[[str, str, PropertyType], Awaitable[list[RawRecord]]]


async def _load_raw_records(
    region_code: str,
    year_month: str,
    property_type: PropertyType,
    cache: TTLCache | None,
    fetcher: RawFetcher,
) -> list[RawRecord]:
    key = ("molit", region_code, year_month, property_type.value)
    if cache is not None:
        cached = cache.get(key)
        if cached is not None:
            logger.debug("MOLIT 캐시 적중: %s", key)
            return cached

    records = await fetcher(region_code, year_month, property_type)
    if cache is not None and records:
        cache.set(key, records, settings.deals_cache_ttl_seconds)
    return records


async def fetch_deals(
    region_code: str,
    year_month: str,
    property_type: PropertyType = PropertyType.APARTMENT,
    *,
    filter_config: FilterConfig | None = None,
    cache: TTLCache | None = None,
    fetcher: RawFetcher | None = None,
    metadata: Mapping[str, ComplexMetadata] = COMPLEX_METADATA,
    today: date | None = None,
) -> DealsResult:
    """한 지역/한 달의 실거래를 조회해 정규화·필터링·요약한다.

    처리 흐름:
    1. API 키가 없으면 모의 데이터 사용 (source="mock")
    2. 캐시 또는 국토부 API에서 원본 레코드 수집 (첫 페이지)
    3. 레코드 정규화 → 지역/면적 필터 → 계약일 내림차순 정렬 → 요약

    Raises:
        EmptyUpstreamError: API가 0건을 반환
        UpstreamPayloadError: 응답 해석 실패
        UpstreamRequestError: HTTP 호출 실패
        NoQualifyingDealsError: 필터 통과 거래 없음
    """
    filter_config = filter_config or FilterConfig.from_settings()

    if not settings.molit_api_key and fetcher is None:
        logger.info("MOLIT API 키 없음 → 모의 데이터 사용 (region=%s)", region_code)
        mock = build_mock_deals(region_code, property_type, today=today)
        deals = sort_by_contract_date_desc(filter_deals(mock, filter_config))
        return DealsResult(
            deals=deals,
            summary=summarize_deals(deals),
            region_code=region_code,
            year_month=year_month,
            property_type=property_type,
            source="mock",
            fetched_total=len(mock),
        )

    records = await _load_raw_records(
        region_code, year_month, property_type, cache, fetcher or molit_api.fetch_raw_records
    )
    if not records:
        raise EmptyUpstreamError(f"{year_month} {region_code} 지역에 신고된 거래가 없습니다.")

    normalized = normalize_deals(
        records,
        property_type,
        metadata=metadata,
        default_lawd_code=region_code,
        today=today,
    )
    deals = sort_by_contract_date_desc(filter_deals(normalized, filter_config))
    summary = summarize_deals(deals)

    logger.info(
        "실거래 조회 완료: %s %s %s, 원본 %d건 → %d건, 평균 %s, 직전 대비 %s, 면적 %s ~ %s",
        region_code,
        year_month,
        property_type.value,
        len(records),
        len(deals),
        format_korean_price(summary.average_price),
        percent_label(summary.price_change_ratio),
        format_area(summary.area_range[0]),
        format_area(summary.area_range[1]),
    )
    return DealsResult(
        deals=deals,
        summary=summary,
        region_code=region_code,
        year_month=year_month,
        property_type=property_type,
        source="api",
        fetched_total=len(records),
    )
