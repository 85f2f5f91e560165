"""대출 참고 정보 엔드포인트"""

from fastapi import APIRouter

from app.data.loan_reference import LOAN_POINTS, LOAN_PRICE_CAP, REQUIRED_DOCUMENTS
from app.schemas.finance import FinanceReference

router = APIRouter()


@router.get("")
async def get_finance() -> FinanceReference:
    """보금자리론 한도·금리·LTV 요약과 필수 서류 목록"""
    return FinanceReference(
        loan_points=list(LOAN_POINTS),
        required_documents=list(REQUIRED_DOCUMENTS),
        price_cap=LOAN_PRICE_CAP,
    )
