"""실거래 요약 통계 (평균/중위가, 최근가, 면적 범위, 월별 평균 시계열)"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone

from app.deals.formatting import price_diff_ratio
from app.schemas.deal import DealsSummary, NormalizedDeal, PricePoint


def median(values: Sequence[float]) -> float:
    """중위값. 짝수 개면 가운데 두 값의 평균, 빈 입력이면 0."""
    if not values:
        return 0.0
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return float(ordered[mid])


def sort_by_contract_date_desc(deals: Sequence[NormalizedDeal]) -> list[NormalizedDeal]:
    """계약일 내림차순 정렬 사본 (같은 날짜는 입력 순서 유지)"""
    return sorted(deals, key=lambda d: d.contract_date, reverse=True)


def build_monthly_series(deals: Sequence[NormalizedDeal]) -> list[PricePoint]:
    """거래 데이터를 월별 평균가로 집계한다."""
    monthly: dict[str, list[int]] = {}
    for d in deals:
        key = f"{d.year}-{d.month:02d}"
        monthly.setdefault(key, []).append(d.price)
    return [PricePoint(label=k, value=sum(v) / len(v)) for k, v in sorted(monthly.items())]


def summarize_deals(deals: Sequence[NormalizedDeal], *, now: datetime | None = None) -> DealsSummary:
    """거래 목록의 요약 통계를 계산한다. 0건/1건에도 NaN이나 예외 없이 동작한다."""
    ordered = sort_by_contract_date_desc(deals)
    prices = [d.price for d in ordered]
    areas = [d.area for d in ordered]

    latest = prices[0] if prices else None
    previous = prices[1] if len(prices) > 1 else None

    return DealsSummary(
        average_price=sum(prices) / max(len(prices), 1),
        median_price=median(prices),
        latest_price=latest,
        previous_price=previous,
        price_change_ratio=price_diff_ratio(latest, previous),
        total_deals=len(ordered),
        area_range=(min(areas), max(areas)) if areas else (0.0, 0.0),
        monthly_series=build_monthly_series(ordered),
        updated_at=now or datetime.now(timezone.utc),
    )
