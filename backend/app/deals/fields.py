"""원본 거래 레코드 필드 추출 / 숫자 변환

국토부 API는 부동산 유형과 API 개정에 따라 필드명이 다르다
(한글 태그 → 영문 태그, 아파트/오피스텔/단독주택별 명칭 차이).
논리 필드별 별칭 목록을 한 곳에 모아 두고 ``read_field``로만 읽는다.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence
from typing import Any

# 논리 필드 → 원본 키 후보 (우선순위 순)
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "area": ("전용면적", "excluUseAr", "exclusiveArea", "연면적", "totalFloorAr"),
    "price": ("거래금액", "dealAmount"),
    "lawd_code": ("법정동시군구코드", "lawdCd", "지역코드", "sggCd"),
    "year": ("년", "dealYear", "계약년도"),
    "month": ("월", "dealMonth", "계약월"),
    "day": ("일", "dealDay", "계약일"),
    "complex_name": ("아파트", "aptNm", "단지명", "단지", "offiNm", "연립다세대", "mhouseNm", "aptName"),
    "region_name": ("시군구", "sggNm", "법정동", "umdNm", "region"),
    "neighborhood": ("법정동", "umdNm", "법정동명", "neighborhood"),
    "road_name": ("도로명", "roadNm", "roadName"),
    "floor": ("층", "floor"),
    "total_floors": ("총층수", "totalFloors", "totFloor"),
    "serial": ("일련번호", "serialNumber"),
    "complex_seq": ("aptSeq",),  # 단지 일련번호 (거래 단위 아님)
    "build_year": ("건축년도", "buildYear"),
    "sgg_code": ("sggCd", "법정동시군구코드"),
    "umd_code": ("umdCd", "법정동읍면동코드"),
    "bonbun": ("bonbun", "법정동본번코드"),
    "bubun": ("bubun", "법정동부번코드"),
}

_NON_NUMERIC = re.compile(r"[^\d.]")
_FIRST_INT = re.compile(r"-?\d+")


def pick_value(record: Mapping[str, Any], keys: Sequence[str]) -> Any | None:
    """여러 키 중 첫 번째로 값이 있는 것을 반환한다 (한글/영어 호환).

    문자열은 공백을 제거한 값을 돌려주며, 빈 문자열은 없는 값으로 본다.
    일치하는 키가 없으면 None.
    """
    for key in keys:
        value = record.get(key)
        if value is None:
            continue
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
        return value
    return None


def read_field(record: Mapping[str, Any], field_name: str) -> Any | None:
    """논리 필드명으로 값을 읽는다."""
    return pick_value(record, FIELD_ALIASES[field_name])


def read_text(record: Mapping[str, Any], field_name: str) -> str | None:
    value = read_field(record, field_name)
    return None if value is None else str(value)


def coerce_number(value: Any) -> float:
    """느슨한 형식의 숫자 문자열을 숫자로 변환한다.

    통화 기호, 천 단위 구분자, 단위 문자는 버린다. 변환 실패 시 0.

    Examples:
        >>> coerce_number("1,234,000원")
        1234000.0
        >>> coerce_number(None)
        0.0
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else 0.0
    if value is None:
        return 0.0

    text = str(value).strip()
    negative = text.startswith("-")
    digits = _NON_NUMERIC.sub("", text)
    if not digits:
        return 0.0
    try:
        number = float(digits)
    except ValueError:
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return -number if negative else number


def coerce_int(value: Any) -> int | None:
    """선택 정수 필드용 변환. 값이 없으면 None."""
    if value is None:
        return None
    return int(coerce_number(value))


def parse_floor(label: str | None) -> int | None:
    """층 문자열("12", "12층", "-1", "B1")에서 층수를 추출한다."""
    if not label:
        return None
    text = label.strip()
    match = _FIRST_INT.search(text)
    if not match:
        return None
    number = int(match.group())
    if number > 0 and text.upper().startswith(("B", "지하")):
        return -number
    return number
