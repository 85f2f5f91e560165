"""조회 가능한 시군구 목록"""

from __future__ import annotations

from dataclasses import dataclass

from app.config import settings


@dataclass(frozen=True)
class RegionOption:
    code: str  # 법정동코드 5자리
    label: str
    short_label: str


REGIONS: tuple[RegionOption, ...] = (
    RegionOption("11110", "서울 종로구", "종로구"),
    RegionOption("11140", "서울 중구", "중구"),
    RegionOption("11170", "서울 용산구", "용산구"),
    RegionOption("11215", "서울 광진구", "광진구"),
    RegionOption("11260", "서울 중랑구", "중랑구"),
    RegionOption("11380", "서울 은평구", "은평구"),
    RegionOption("11350", "서울 노원구", "노원구"),
    RegionOption("11500", "서울 강서구", "강서구"),
    RegionOption("11680", "서울 강남구", "강남구"),
    RegionOption("11710", "서울 송파구", "송파구"),
    RegionOption("11740", "서울 강동구", "강동구"),
    RegionOption("41117", "경기 수원시 영통구", "영통구"),
    RegionOption("41463", "경기 용인시 기흥구", "기흥구"),
    RegionOption("41135", "경기 성남시 분당구", "분당구"),
    RegionOption("41590", "경기 화성시", "화성시"),
    RegionOption("41450", "경기 하남시", "하남시"),
    RegionOption("41285", "경기 고양시 일산동구", "일산동구"),
    RegionOption("41480", "경기 파주시 (운정신도시)", "파주시"),
    RegionOption("28185", "인천 연수구", "연수구"),
)


def find_region(code: str) -> RegionOption | None:
    return next((r for r in REGIONS if r.code == code), None)


DEFAULT_REGION = find_region(settings.default_region_code) or REGIONS[0]
