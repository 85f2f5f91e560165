"""Task-01: 원본 레코드 필드 추출 / 숫자 변환 단위 테스트"""

from __future__ import annotations

import math

import pytest

from app.deals.fields import (
    FIELD_ALIASES,
    coerce_int,
    coerce_number,
    parse_floor,
    pick_value,
    read_field,
)


# ---------------------------------------------------------------------------
# T-1: 별칭 키 우선순위
# ---------------------------------------------------------------------------


def test_pick_value_first_alias_wins():
    """앞선 별칭에 값이 있으면 그 값을 반환한다."""
    record = {"거래금액": "85,000", "dealAmount": "90,000"}
    assert pick_value(record, ["거래금액", "dealAmount"]) == "85,000"


def test_pick_value_skips_empty_and_none():
    """None, 빈 문자열, 공백 문자열은 건너뛴다."""
    record = {"아파트": "  ", "aptNm": None, "단지명": " 래미안 "}
    assert pick_value(record, ["아파트", "aptNm", "단지명"]) == "래미안"


def test_pick_value_missing_returns_none():
    """일치하는 키가 없으면 예외 없이 None."""
    assert pick_value({"층": "3"}, ["floor_x", "floorNo"]) is None
    assert pick_value({}, []) is None


def test_pick_value_keeps_numbers():
    """숫자 값은 그대로, 0도 유효한 값으로 본다."""
    assert pick_value({"excluUseAr": 84.97}, ["excluUseAr"]) == 84.97
    assert pick_value({"floor": 0}, ["floor"]) == 0


def test_read_field_uses_alias_table():
    """영문 태그만 있는 신버전 레코드도 논리 필드명으로 읽힌다."""
    record = {"excluUseAr": "59.99", "dealYear": "2025", "aptNm": "운정자이"}
    assert read_field(record, "area") == "59.99"
    assert read_field(record, "year") == "2025"
    assert read_field(record, "complex_name") == "운정자이"
    assert read_field(record, "floor") is None


def test_alias_table_covers_logical_fields():
    for name in (
        "area", "price", "lawd_code", "year", "month", "day", "complex_name",
        "region_name", "floor", "total_floors", "serial", "road_name",
    ):
        assert FIELD_ALIASES[name], name


# ---------------------------------------------------------------------------
# T-2: 숫자 변환
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("1,234,000원", 1_234_000),
        (" 85,000", 85_000),
        ("84.97㎡", 84.97),
        ("-3", -3),
        (None, 0),
        ("abc", 0),
        ("", 0),
        ("1.2.3", 0),
        (1500, 1500),
        (59.9, 59.9),
    ],
)
def test_coerce_number(value, expected):
    assert coerce_number(value) == expected


def test_coerce_number_never_nan():
    """NaN/무한대 입력도 0으로 정리한다."""
    assert coerce_number(float("nan")) == 0
    assert coerce_number(float("inf")) == 0
    assert not math.isnan(coerce_number("nan"))


def test_coerce_int_optional():
    assert coerce_int(None) is None
    assert coerce_int("29") == 29
    assert coerce_int("2,021년") == 2021


# ---------------------------------------------------------------------------
# T-3: 층 파싱
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("label", "expected"),
    [("12", 12), ("12층", 12), ("-1", -1), ("B2", -2), ("지하1", -1), (None, None), ("층", None)],
)
def test_parse_floor(label, expected):
    assert parse_floor(label) == expected
