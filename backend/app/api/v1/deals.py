"""실거래 조회 엔드포인트"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import get_cache
from app.cache import TTLCache
from app.config import settings
from app.data.loan_reference import is_loan_eligible
from app.data.regions import DEFAULT_REGION, REGIONS, RegionOption, find_region
from app.deals.errors import (
    DealsError,
    EmptyUpstreamError,
    NoQualifyingDealsError,
)
from app.deals.service import fetch_deals
from app.deals.summary import summarize_deals
from app.schemas.deal import DealsResult, PropertyType

logger = logging.getLogger("app.deals")

router = APIRouter()

# 조회 결과 없음은 404, 업스트림 전송/형식 오류는 502
_NOT_FOUND_ERRORS = (EmptyUpstreamError, NoQualifyingDealsError)


def _current_year_month() -> str:
    return date.today().strftime("%Y%m")


def _to_http_error(exc: DealsError) -> HTTPException:
    status_code = 404 if isinstance(exc, _NOT_FOUND_ERRORS) else 502
    return HTTPException(status_code=status_code, detail={"code": exc.code, "message": exc.message})


@router.get("")
async def get_deals(
    region: str = Query(default=DEFAULT_REGION.code, pattern=r"^\d{5}$"),
    year_month: str | None = Query(default=None, pattern=r"^\d{6}$"),
    property_type: PropertyType = Query(default=PropertyType(settings.default_property_type)),
    loan_eligible_only: bool = False,
    cache: TTLCache = Depends(get_cache),
) -> DealsResult:
    """지역·월별 실거래 목록과 요약 통계를 반환합니다.

    보금자리론 요건(운정신도시 + 전용 84㎡ 이하)으로 필터링한 결과이며,
    loan_eligible_only=true면 가격 상한(9억) 이하 거래만 남깁니다.
    """
    year_month = year_month or _current_year_month()
    try:
        result = await fetch_deals(region, year_month, property_type, cache=cache)
        if loan_eligible_only:
            eligible = [d for d in result.deals if is_loan_eligible(d)]
            if not eligible:
                raise NoQualifyingDealsError("보금자리론 가격 상한 이하 거래가 없습니다.")
            result = replace(result, deals=eligible, summary=summarize_deals(eligible))
    except DealsError as exc:
        region_option = find_region(region)
        logger.warning(
            "실거래 조회 실패 [%s %s %s]: %s",
            region_option.label if region_option else region,
            year_month,
            property_type.value,
            exc.code,
        )
        raise _to_http_error(exc) from exc
    return result


@router.get("/regions")
async def get_regions() -> list[RegionOption]:
    """조회 가능한 지역 목록"""
    return list(REGIONS)
