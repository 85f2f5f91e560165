"""기준금리 참고값 (공개 API가 없어 수동 갱신)"""

from __future__ import annotations

from app.schemas.market import MarketIndicator

KOREA_BASE_RATE = MarketIndicator(
    label="한국 기준금리",
    value=3.5,
    source="한국은행 (2025-02 기준)",
)

US_BASE_RATE = MarketIndicator(
    label="미국 기준금리",
    value=5.25,
    source="미 연준 (2025-03 FOMC)",
)
