"""지역(동네)·면적 조건 필터"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from app.config import settings
from app.deals.errors import NoQualifyingDealsError
from app.schemas.deal import NormalizedDeal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterConfig:
    """필터 조건.

    max_area_sqm이 None이면 면적 제한 없음, 키워드가 비어 있으면 지역 제한 없음.
    """

    max_area_sqm: float | None = 84.0
    neighborhood_keywords: frozenset[str] = field(default_factory=frozenset)
    area_tolerance_sqm: float = 0.5

    @classmethod
    def from_settings(cls) -> FilterConfig:
        return cls(
            max_area_sqm=settings.max_area_sqm,
            neighborhood_keywords=frozenset(settings.neighborhood_keywords),
            area_tolerance_sqm=settings.area_tolerance_sqm,
        )


def within_max_area(deal: NormalizedDeal, config: FilterConfig) -> bool:
    """면적 미상(0)은 통과. 신고 면적 반올림 오차만큼 허용한다."""
    if config.max_area_sqm is None or deal.area == 0:
        return True
    return deal.area <= config.max_area_sqm + config.area_tolerance_sqm


def in_neighborhood(deal: NormalizedDeal, config: FilterConfig) -> bool:
    """지역명/법정동/단지명/도로명 어디에든 키워드가 포함되면 통과 (부분 매칭)."""
    if not config.neighborhood_keywords:
        return True
    haystack = "".join(
        part or ""
        for part in (deal.region_name, deal.neighborhood, deal.complex_name, deal.road_name)
    )
    return any(keyword in haystack for keyword in config.neighborhood_keywords)


def matches_filter(deal: NormalizedDeal, config: FilterConfig) -> bool:
    return within_max_area(deal, config) and in_neighborhood(deal, config)


def filter_deals(deals: Iterable[NormalizedDeal], config: FilterConfig) -> list[NormalizedDeal]:
    """조건을 통과한 거래만 남긴다.

    Raises:
        NoQualifyingDealsError: 입력은 있었지만 통과한 거래가 하나도 없는 경우
    """
    deals = list(deals)
    filtered = [d for d in deals if matches_filter(d, config)]
    logger.info(
        "필터링 (면적<=%s㎡, 키워드 %d개): %d→%d건",
        config.max_area_sqm,
        len(config.neighborhood_keywords),
        len(deals),
        len(filtered),
    )
    if deals and not filtered:
        raise NoQualifyingDealsError()
    return filtered
