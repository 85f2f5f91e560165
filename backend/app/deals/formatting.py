"""가격/면적 표시 헬퍼"""

from __future__ import annotations

# ㎡ → 평 변환 계수
SQM_PER_PYEONG = 3.3058


def format_korean_price(value: float | None) -> str:
    """원 단위 금액을 "9억 5000만 원" 형식으로 변환한다.

    Examples:
        >>> format_korean_price(950_000_000)
        '9억 5000만 원'
        >>> format_korean_price(None)
        '-'
    """
    if value is None:
        return "-"
    total_man = round(round(value) / 10_000)
    if total_man == 0:
        return "0원"

    eok, man = divmod(total_man, 10_000)
    parts: list[str] = []
    if eok:
        parts.append(f"{eok}억")
    if man:
        parts.append(f"{man}만")
    return f"{' '.join(parts)} 원"


def format_area(sqm: float) -> str:
    return f"{sqm:.1f}㎡ (약 {sqm / SQM_PER_PYEONG:.1f}평)"


def price_diff_ratio(current: float | None, previous: float | None) -> float:
    """직전 대비 변동률(%). 어느 한쪽이 없거나 0이면 0."""
    if not current or not previous:
        return 0.0
    return (current - previous) / previous * 100


def percent_label(ratio: float) -> str:
    return f"{'+' if ratio > 0 else ''}{ratio:.1f}%"
