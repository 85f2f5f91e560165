"""실거래 데이터 스키마"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Literal

# 국토부 API 응답 한 행 (필드명은 API 버전/유형마다 다름)
RawRecord = dict[str, Any]


class PropertyType(str, Enum):
    APARTMENT = "apartment"
    OFFICETEL = "officetel"
    HOUSE = "house"


@dataclass(frozen=True)
class NormalizedDeal:
    """정규화된 매매 실거래 1건"""

    id: str
    property_type: PropertyType
    complex_name: str
    area: float  # 전용면적 (㎡)
    contract_date: date
    price: int  # 거래금액 (원 단위)
    price_per_area: float  # ㎡당 가격 (면적 미상이면 거래금액)
    lawd_code: str
    region_name: str
    year: int
    month: int
    contract_date_inferred: bool = False  # 계약일 일부가 누락되어 오늘 날짜로 채운 경우
    floor_label: str | None = None
    floor_number: int | None = None
    total_floors: int | None = None
    neighborhood: str | None = None
    road_name: str | None = None
    sgg_code: str | None = None
    umd_code: str | None = None
    bonbun: str | None = None
    bubun: str | None = None
    build_year: int | None = None
    households: int | None = None
    station_distance: str | None = None
    area_tag: str | None = None  # "59" / "84"


@dataclass(frozen=True)
class PricePoint:
    """월별 평균가 (차트용)"""

    label: str  # YYYY-MM
    value: float


@dataclass(frozen=True)
class DealsSummary:
    """실거래 요약 통계"""

    average_price: float = 0.0
    median_price: float = 0.0
    latest_price: int | None = None
    previous_price: int | None = None
    price_change_ratio: float = 0.0  # 직전 거래 대비 변동률 (%)
    total_deals: int = 0
    area_range: tuple[float, float] = (0.0, 0.0)
    monthly_series: list[PricePoint] = field(default_factory=list)
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class DealsResult:
    """실거래 조회 결과"""

    deals: list[NormalizedDeal]
    summary: DealsSummary
    region_code: str
    year_month: str
    property_type: PropertyType
    source: Literal["api", "mock"] = "api"
    fetched_total: int = 0  # 필터링 전 원본 행 수
