"""API 키 없이 개발할 때 쓰는 모의 실거래 데이터"""

from __future__ import annotations

import math
import random
from datetime import date, timedelta

from app.deals.normalizer import classify_area_tag
from app.schemas.deal import NormalizedDeal, PropertyType

BASE_PRICES: dict[PropertyType, int] = {
    PropertyType.APARTMENT: 970_000_000,
    PropertyType.OFFICETEL: 520_000_000,
    PropertyType.HOUSE: 780_000_000,
}

APT_NAMES = (
    "운정힐스테이트",
    "한화포레나운정",
    "동문굿모닝힐",
    "푸르지오파르세나",
    "한라비발디",
    "자이더시티",
    "e편한세상운정",
    "센트럴푸르지오",
)

NEIGHBORHOODS = ("목동동", "야당동", "와동동", "동패동", "다율동")


def build_mock_deals(
    region_code: str,
    property_type: PropertyType = PropertyType.APARTMENT,
    *,
    rows: int = 24,
    today: date | None = None,
    seed: int | None = 0,
) -> list[NormalizedDeal]:
    """5일 간격으로 과거로 거슬러 가는 모의 거래를 만든다 (계약일 내림차순)."""
    today = today or date.today()
    rng = random.Random(seed)
    deals: list[NormalizedDeal] = []

    for index in range(rows):
        deal_date = today - timedelta(days=index * 5)
        seasonality = math.sin(index / 4) * 25_000_000
        noise = rng.uniform(-25_000_000, 25_000_000)
        raw_price = max(200_000_000, BASE_PRICES[property_type] + seasonality + noise)
        price = round(raw_price / 10_000) * 10_000
        area = float(74 + (index % 5) * 3)
        is_house = property_type is PropertyType.HOUSE
        floor = None if is_house else 10 + index % 15

        deals.append(
            NormalizedDeal(
                id=f"{region_code}-{property_type.value}-{index}",
                property_type=property_type,
                complex_name="전원주택" if is_house else APT_NAMES[index % len(APT_NAMES)],
                area=area,
                contract_date=deal_date,
                price=price,
                price_per_area=price / area,
                lawd_code=region_code,
                region_name=region_code,
                neighborhood=NEIGHBORHOODS[index % len(NEIGHBORHOODS)],
                floor_label=None if floor is None else f"{floor}층",
                floor_number=floor,
                total_floors=None if is_house else 25 + (index % 5) * 3,
                area_tag=classify_area_tag(area),
                year=deal_date.year,
                month=deal_date.month,
            )
        )
    return deals
