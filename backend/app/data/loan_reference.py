"""보금자리론 참고 정보 (대출 한도/금리/LTV, 필수 서류)

은행 상담 전 확인용 정적 데이터. 실제 조건은 시점·소득에 따라 다르다.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.schemas.deal import NormalizedDeal

# 보금자리론 대상 주택 가격 상한 (시가 9억 이하)
LOAN_PRICE_CAP = 900_000_000


@dataclass(frozen=True)
class LoanPoint:
    label: str
    value: str
    helper: str


LOAN_POINTS: tuple[LoanPoint, ...] = (
    LoanPoint("대출 한도", "최대 4.7억", "생애최초 + 2인 이상 가구 기준"),
    LoanPoint("금리 구간", "연 3.45%~", "신혼/다자녀 우대 시"),
    LoanPoint("LTV / DTI", "70% / 60%", "비규제지역, 시가 9억 이하"),
    LoanPoint("거치 / 상환", "거치 3년 / 30년", "중도상환수수료 3년간 1.2% → 0%"),
)

REQUIRED_DOCUMENTS: tuple[str, ...] = (
    "혼인·가족관계증명서, 주민등록등본, 등본상 세대원 전원 준비",
    "재직증명서 + 근로소득원천징수영수증(또는 소득금액증명)",
    "매매계약서 원본 및 잔금계약 관련 서류",
    "기존 대출 상환내역, 신용정보 조회 동의서",
)


def is_loan_eligible(deal: NormalizedDeal, price_cap: int = LOAN_PRICE_CAP) -> bool:
    """거래가가 보금자리론 가격 상한 이하인지 확인한다."""
    return 0 < deal.price <= price_cap
