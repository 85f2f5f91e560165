"""시장 지표 스키마"""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class MarketIndicator:
    """단일 지표 (기준금리, 환율 등)"""

    label: str
    value: float
    source: str


@dataclass(frozen=True)
class MarketSnapshot:
    """대시보드 시장 지표 묶음"""

    korea_base_rate: MarketIndicator
    us_base_rate: MarketIndicator
    usd_krw: MarketIndicator
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    error: str | None = None
