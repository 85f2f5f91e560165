"""운정신도시 주요 단지 메타데이터 (세대수, 역 거리, 준공연도, 최고층, 대표 평형)

국토부 실거래가 API에는 없는 정보라 수동으로 관리한다.
키는 ``normalize_complex_name``으로 정규화한 단지명이다.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class ComplexMetadata:
    households: int | None = None
    station_distance: str | None = None
    build_year: int | None = None
    total_floors: int | None = None
    area_tags: tuple[str, ...] = ()


def normalize_complex_name(name: str | None) -> str:
    """공백 제거 + 소문자화한 단지명 조회 키"""
    if not name:
        return ""
    return re.sub(r"\s+", "", name).casefold()


COMPLEX_METADATA: Mapping[str, ComplexMetadata] = {
    normalize_complex_name("한빛마을12단지e편한세상운정어반프라임"): ComplexMetadata(
        households=1224,
        station_distance="GTX 운정역 도보 12분",
        build_year=2021,
        total_floors=29,
        area_tags=("84",),
    ),
    normalize_complex_name("가람마을14단지푸르지오파르세나"): ComplexMetadata(
        households=596,
        station_distance="운정역 버스 7분",
        build_year=2020,
        total_floors=25,
        area_tags=("59", "84"),
    ),
    normalize_complex_name("가람마을9단지힐스테이트운정"): ComplexMetadata(
        households=930,
        station_distance="운정역 도보 15분",
        build_year=2019,
        total_floors=30,
        area_tags=("84",),
    ),
    normalize_complex_name("한양수자인리버팰리스아파트"): ComplexMetadata(
        households=792,
        station_distance="야당역 도보 10분",
        build_year=2018,
        total_floors=29,
        area_tags=("59", "84"),
    ),
    normalize_complex_name("우미린11단지현대아이파크"): ComplexMetadata(
        households=844,
        station_distance="GTX 운정역 도보 10분",
        build_year=2022,
        total_floors=30,
        area_tags=("84",),
    ),
    normalize_complex_name("세양에이리"): ComplexMetadata(
        households=712,
        station_distance="야당역 버스 8분",
        build_year=2017,
        total_floors=25,
        area_tags=("59",),
    ),
}


def get_complex_metadata(
    name: str | None,
    table: Mapping[str, ComplexMetadata] = COMPLEX_METADATA,
) -> ComplexMetadata | None:
    return table.get(normalize_complex_name(name))
