"""국토교통부 공공데이터 실거래가 API 클라이언트"""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote, unquote, urlencode
import xml.etree.ElementTree as ET

import httpx

from app.config import settings
from app.deals.errors import UpstreamPayloadError, UpstreamRequestError
from app.schemas.deal import PropertyType, RawRecord

logger = logging.getLogger(__name__)

# 부동산 유형별 API 경로 (공공데이터포털 신규 엔드포인트)
API_ENDPOINTS: dict[PropertyType, str] = {
    PropertyType.APARTMENT: "/RTMSDataSvcAptTrade/getRTMSDataSvcAptTrade",
    PropertyType.OFFICETEL: "/RTMSDataSvcOffiTrade/getRTMSDataSvcOffiTrade",
    PropertyType.HOUSE: "/RTMSDataSvcSHTrade/getRTMSDataSvcSHTrade",
}

# 정상 응답 코드 (구버전 "00", 신버전 "000")
_OK_RESULT_CODES = {"00", "000"}


def _as_list(value: Any) -> list:
    """단건이면 dict, 여러 건이면 list로 오는 item 필드를 list로 맞춘다."""
    if not value:
        return []
    return value if isinstance(value, list) else [value]


def _dig(payload: Any, *path: str) -> Any:
    for key in path:
        if not isinstance(payload, dict):
            return None
        payload = payload.get(key)
    return payload


def _parse_json(payload: Any) -> list[RawRecord]:
    """JSON 응답에서 거래 행을 꺼낸다 (odcloud / data.go.kr 양쪽 형식)."""
    header_code = _dig(payload, "response", "header", "resultCode")
    if header_code is not None and str(header_code) not in _OK_RESULT_CODES:
        message = _dig(payload, "response", "header", "resultMsg") or header_code
        raise UpstreamPayloadError(f"국토부 API 오류 응답: {message}")

    candidates = (
        _dig(payload, "data"),
        _dig(payload, "response", "body", "items", "item"),
        _dig(payload, "response", "body", "items"),
        _dig(payload, "ApartmentTransactionService", "body", "items"),
    )
    for candidate in candidates:
        # items가 {"item": ...} 형태면 위 두 번째 경로에서 이미 처리됨
        if isinstance(candidate, dict) and "item" in candidate:
            continue
        rows = _as_list(candidate)
        if rows:
            return [row for row in rows if isinstance(row, dict)]
    return []


def _parse_xml(xml_text: str) -> list[RawRecord]:
    """XML 응답의 <item>을 {태그명: 텍스트} dict로 변환한다."""
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise UpstreamPayloadError(f"국토부 API XML 파싱 실패: {exc}") from exc

    # 게이트웨이 오류 (서비스키 미등록, 트래픽 초과 등)
    if root.tag == "OpenAPI_ServiceResponse":
        reason = root.findtext(".//returnAuthMsg") or root.findtext(".//errMsg") or "unknown"
        raise UpstreamPayloadError(f"국토부 API 게이트웨이 오류: {reason.strip()}")

    result_code = (root.findtext(".//header/resultCode") or "").strip()
    if result_code and result_code not in _OK_RESULT_CODES:
        message = (root.findtext(".//header/resultMsg") or result_code).strip()
        raise UpstreamPayloadError(f"국토부 API 오류 응답: {message}")

    return [
        {child.tag: (child.text or "").strip() for child in item}
        for item in root.findall(".//item")
    ]


def parse_payload(text: str) -> list[RawRecord]:
    """MOLIT API 응답 본문(JSON 또는 XML)을 원본 레코드 리스트로 변환한다.

    Raises:
        UpstreamPayloadError: HTML 오류 페이지 등 해석할 수 없는 응답
    """
    body = text.lstrip("\ufeff \t\r\n")
    if not body:
        raise UpstreamPayloadError("국토부 API 응답 본문이 비어 있습니다.")

    if body[0] in "{[":
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as exc:
            raise UpstreamPayloadError(f"국토부 API JSON 파싱 실패: {exc}") from exc
        if isinstance(payload, list):
            return [row for row in payload if isinstance(row, dict)]
        return _parse_json(payload)

    head = body[:200].lower()
    if head.startswith("<!doctype html") or "<html" in head:
        raise UpstreamPayloadError("국토부 API가 HTML 오류 페이지를 반환했습니다.")
    if body.startswith("<"):
        return _parse_xml(body)

    raise UpstreamPayloadError(f"알 수 없는 응답 형식: {body[:80]!r}")


def build_request_url(region_code: str, year_month: str, property_type: PropertyType) -> str:
    endpoint = API_ENDPOINTS.get(property_type, API_ENDPOINTS[PropertyType.APARTMENT])

    # serviceKey의 +, /, = 등 특수문자를 percent-encoding 처리
    raw_key = unquote(settings.molit_api_key)
    encoded_key = quote(raw_key, safe="")
    other_params = urlencode({
        "LAWD_CD": region_code,
        "DEAL_YMD": year_month,
        "pageNo": 1,
        "numOfRows": settings.molit_num_of_rows,
    })
    return f"{settings.molit_api_base.rstrip('/')}{endpoint}?serviceKey={encoded_key}&{other_params}"


async def fetch_raw_records(
    region_code: str,
    year_month: str,
    property_type: PropertyType = PropertyType.APARTMENT,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[RawRecord]:
    """국토교통부 실거래가 API를 호출한다 (첫 페이지만).

    Args:
        region_code: 법정동코드 5자리
        year_month: 계약년월 (YYYYMM)
        property_type: 부동산 유형
        transport: 테스트용 httpx transport

    Returns:
        원본 거래 레코드 리스트

    Raises:
        UpstreamRequestError: HTTP 오류/타임아웃
        UpstreamPayloadError: 응답을 해석할 수 없는 경우
    """
    url = build_request_url(region_code, year_month, property_type)

    try:
        async with httpx.AsyncClient(
            timeout=settings.request_timeout_seconds, transport=transport
        ) as client:
            response = await client.get(url, headers={"Accept": "application/json"})
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.warning("MOLIT API HTTP 오류 [%s %s]: %s", region_code, year_month, exc)
        raise UpstreamRequestError(
            f"국토부 API 호출 실패: HTTP {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        logger.warning("MOLIT API 호출 실패 [%s %s]: %s", region_code, year_month, exc)
        raise UpstreamRequestError(f"국토부 API 호출 실패: {exc}") from exc

    records = parse_payload(response.text)
    logger.debug(
        "  MOLIT API [%s] %s %s: %d건", year_month, region_code, property_type.value, len(records)
    )
    return records
