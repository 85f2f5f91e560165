"""라우트 공용 의존성"""

from app.cache import InMemoryTTLCache, TTLCache

# 프로세스 단위 외부 API 응답 캐시
_upstream_cache = InMemoryTTLCache()


def get_cache() -> TTLCache:
    return _upstream_cache
