"""실거래 파이프라인 도메인 예외

호출 측(라우트)이 사용자 메시지를 고를 수 있도록 실패 유형을 구분한다.
"""

from __future__ import annotations


class DealsError(Exception):
    """실거래 조회 실패의 공통 부모 예외"""

    code = "deals_error"
    default_message = "실거래 데이터를 불러오지 못했습니다."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class EmptyUpstreamError(DealsError):
    """국토부 API가 0건을 반환한 경우"""

    code = "empty_upstream"
    default_message = "해당 기간에 신고된 거래가 없습니다."


class UpstreamPayloadError(DealsError):
    """응답 본문을 해석할 수 없는 경우 (HTML 오류 페이지, 오류 코드 등)"""

    code = "upstream_payload"
    default_message = "국토부 API 응답 형식을 해석할 수 없습니다."


class UpstreamRequestError(DealsError):
    """HTTP 오류/타임아웃 등 전송 단계 실패"""

    code = "upstream_request"
    default_message = "국토부 API 호출에 실패했습니다."


class NoQualifyingDealsError(DealsError):
    """면적/지역 조건을 통과한 거래가 없는 경우"""

    code = "no_qualifying_deals"
    default_message = "조건(지역·면적)에 맞는 거래가 없습니다."
