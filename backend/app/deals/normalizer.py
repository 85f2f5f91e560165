"""원본 거래 레코드 → NormalizedDeal 변환

업스트림 응답은 스키마가 보장되지 않으므로 필드 하나가 깨졌다고
거래 전체를 버리지 않는다. 숫자는 0, 문자열은 기본값으로 채운다.
"""

from __future__ import annotations

import calendar
import logging
from collections.abc import Iterable, Mapping
from dataclasses import replace
from datetime import date
from uuid import uuid4

from app.data.complex_metadata import COMPLEX_METADATA, ComplexMetadata, get_complex_metadata
from app.deals.fields import coerce_int, coerce_number, parse_floor, read_field, read_text
from app.schemas.deal import NormalizedDeal, PropertyType, RawRecord

logger = logging.getLogger(__name__)

UNIDENTIFIED_COMPLEX = "미확인 단지"

# 만원 → 원
MAN_WON = 10_000

# 대표 평형 구간 (전용면적 ㎡, 양 끝 포함)
AREA_TAG_RANGES: dict[str, tuple[float, float]] = {
    "59": (55.0, 66.0),
    "84": (80.0, 90.0),
}


def classify_area_tag(area: float, metadata: ComplexMetadata | None = None) -> str | None:
    """전용면적을 대표 평형("59", "84")으로 분류한다.

    단지 메타데이터에 평형이 하나뿐이면 그 값을 그대로 쓴다.
    """
    tags = metadata.area_tags if metadata else ()
    if len(tags) == 1:
        return tags[0]
    for tag, (low, high) in AREA_TAG_RANGES.items():
        if low <= area <= high:
            return tag
    return tags[0] if tags else None


def _resolve_contract_date(raw: RawRecord, today: date) -> tuple[date, bool]:
    """년/월/일을 조합한다. 누락된 항목은 각각 오늘 날짜로 채운다.

    보정이 하나라도 있으면 두 번째 값이 True.
    """
    year = int(coerce_number(read_field(raw, "year")))
    month = int(coerce_number(read_field(raw, "month")))
    day = int(coerce_number(read_field(raw, "day")))
    inferred = False

    if not 1 <= year <= 9999:
        year, inferred = today.year, True
    if not 1 <= month <= 12:
        month, inferred = today.month, True
    last_day = calendar.monthrange(year, month)[1]
    if day <= 0:
        day, inferred = min(today.day, last_day), True
    elif day > last_day:
        # 존재하지 않는 날짜(2월 31일 등)는 말일로 보정하고 추정값으로 표시
        day, inferred = last_day, True
    return date(year, month, day), inferred


def _fallback_serial(raw: RawRecord, contract_date: date, floor_label: str | None) -> str:
    """거래 일련번호가 없을 때 쓰는 식별자.

    신버전 API의 aptSeq는 거래가 아닌 단지 식별자이므로 계약일·층을 붙인다.
    같은 날 같은 층 거래는 normalize_deals에서 순번으로 구분된다.
    """
    complex_seq = read_text(raw, "complex_seq")
    if not complex_seq:
        return uuid4().hex
    return f"{complex_seq}-{contract_date:%Y%m%d}-{floor_label or 0}"


def normalize_deal(
    raw: RawRecord,
    property_type: PropertyType,
    *,
    metadata: Mapping[str, ComplexMetadata] = COMPLEX_METADATA,
    default_lawd_code: str = "",
    today: date | None = None,
) -> NormalizedDeal:
    """원본 레코드 1건을 정규화한다. 잘못된 입력에도 예외를 던지지 않는다."""
    today = today or date.today()

    # 면적·거래금액은 음수가 될 수 없다
    area = max(0.0, float(coerce_number(read_field(raw, "area"))))
    price = max(0, int(round(coerce_number(read_field(raw, "price")) * MAN_WON)))
    lawd_code = read_text(raw, "lawd_code") or default_lawd_code
    contract_date, inferred = _resolve_contract_date(raw, today)
    if inferred:
        logger.warning("계약일 누락·오류 → 보정값 사용: lawd=%s, raw=%s", lawd_code, raw)

    complex_name = read_text(raw, "complex_name") or UNIDENTIFIED_COMPLEX
    floor_label = read_text(raw, "floor")

    # 메타데이터는 레코드 생성 전에 확정한다
    meta = get_complex_metadata(complex_name, metadata)
    total_floors = coerce_int(read_field(raw, "total_floors"))
    build_year = coerce_int(read_field(raw, "build_year"))
    if meta:
        total_floors = total_floors or meta.total_floors
        build_year = build_year or meta.build_year

    serial = read_text(raw, "serial") or _fallback_serial(raw, contract_date, floor_label)

    return NormalizedDeal(
        id=f"{lawd_code}-{serial}",
        property_type=property_type,
        complex_name=complex_name,
        area=area,
        contract_date=contract_date,
        contract_date_inferred=inferred,
        price=price,
        price_per_area=price / area if area > 0 else float(price),
        lawd_code=lawd_code,
        region_name=read_text(raw, "region_name") or lawd_code,
        neighborhood=read_text(raw, "neighborhood"),
        road_name=read_text(raw, "road_name"),
        sgg_code=read_text(raw, "sgg_code"),
        umd_code=read_text(raw, "umd_code"),
        bonbun=read_text(raw, "bonbun"),
        bubun=read_text(raw, "bubun"),
        floor_label=floor_label,
        floor_number=parse_floor(floor_label),
        total_floors=total_floors,
        build_year=build_year,
        households=meta.households if meta else None,
        station_distance=meta.station_distance if meta else None,
        area_tag=classify_area_tag(area, meta),
        year=contract_date.year,
        month=contract_date.month,
    )


def normalize_deals(
    records: Iterable[RawRecord],
    property_type: PropertyType,
    *,
    metadata: Mapping[str, ComplexMetadata] = COMPLEX_METADATA,
    default_lawd_code: str = "",
    today: date | None = None,
) -> list[NormalizedDeal]:
    """한 페이지의 원본 레코드를 정규화한다. 중복 id에는 순번을 붙인다."""
    deals: list[NormalizedDeal] = []
    used: set[str] = set()
    for raw in records:
        deal = normalize_deal(
            raw,
            property_type,
            metadata=metadata,
            default_lawd_code=default_lawd_code,
            today=today,
        )
        if deal.id in used:
            suffix = 2
            while f"{deal.id}-{suffix}" in used:
                suffix += 1
            deal = replace(deal, id=f"{deal.id}-{suffix}")
        used.add(deal.id)
        deals.append(deal)

    logger.debug("정규화 완료: %s %d건", property_type.value, len(deals))
    return deals
