"""대출 참고 정보 스키마"""

from dataclasses import dataclass, field

from app.data.loan_reference import LoanPoint


@dataclass(frozen=True)
class FinanceReference:
    loan_points: list[LoanPoint] = field(default_factory=list)
    required_documents: list[str] = field(default_factory=list)
    price_cap: int = 0
