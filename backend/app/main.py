import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.config import settings


def _setup_logging() -> None:
    """애플리케이션 로깅을 설정한다."""
    log_format = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
    date_format = "%H:%M:%S"
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stderr,
        force=True,
    )

    # 외부 라이브러리 로그는 WARNING 이상만, 앱 로그만 상세 출력
    logging.getLogger().setLevel(logging.WARNING)
    logging.getLogger("app").setLevel(level)

    # httpx: 요청 URL에 serviceKey가 포함되므로 INFO 요청 로그를 남기지 않는다
    logging.getLogger("httpx").setLevel(logging.WARNING)


_setup_logging()


app = FastAPI(
    title="운정 실거래 모니터링",
    description="국토부 실거래가, 환율·기준금리, 부동산 뉴스를 한 화면용 JSON으로 제공합니다.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")
