from pathlib import Path

from pydantic_settings import BaseSettings

# .env 파일 탐색: backend/.env → 프로젝트 루트/.env
_backend_dir = Path(__file__).resolve().parent.parent
_env_candidates = [_backend_dir / ".env", _backend_dir.parent / ".env"]
_env_file = next((p for p in _env_candidates if p.exists()), ".env")


class Settings(BaseSettings):
    model_config = {"env_file": str(_env_file), "env_file_encoding": "utf-8"}

    # Application
    app_env: str = "development"
    debug: bool = True

    # 국토교통부 실거래가 API
    molit_api_key: str = ""
    molit_api_base: str = "https://apis.data.go.kr/1613000"
    molit_num_of_rows: int = 1000
    request_timeout_seconds: float = 30.0

    # 기본 조회 조건 (파주시 운정신도시)
    default_region_code: str = "41480"
    default_property_type: str = "apartment"

    # 보금자리론 요건: 운정신도시 + 전용 84㎡ 이하
    max_area_sqm: float = 84.0
    area_tolerance_sqm: float = 0.5
    neighborhood_keywords: list[str] = [
        "운정",
        "목동동",
        "야당동",
        "와동동",
        "동패동",
        "다율동",
        "당하동",
        "상지석동",
    ]

    # 캐시 TTL (초)
    deals_cache_ttl_seconds: int = 600
    market_cache_ttl_seconds: int = 3600
    news_cache_ttl_seconds: int = 1800

    # 뉴스
    news_window_days: int = 7
    news_max_articles: int = 8

    # 환율
    fx_api_url: str = "https://api.exchangerate.host/latest?base=USD&symbols=KRW"

    # Server
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    host: str = "0.0.0.0"
    port: int = 8000


settings = Settings()
