"""외부 API 응답 TTL 캐시

파이프라인은 캐시를 모른다. 오케스트레이터/라우트에 ``TTLCache``를 주입해
같은 조회를 TTL 안에서 다시 호출하지 않도록 한다.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Hashable
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class TTLCache(Protocol):
    def get(self, key: Hashable) -> Any | None: ...

    def get_stale(self, key: Hashable) -> Any | None: ...

    def set(self, key: Hashable, value: Any, ttl_seconds: float) -> None: ...


class InMemoryTTLCache:
    """프로세스 메모리 TTL 캐시

    ``get_stale``은 만료 여부와 관계없이 마지막 값을 돌려준다
    (외부 API 장애 시 이전 결과 제공용).
    """

    def __init__(self, max_size: int = 512, clock: Callable[[], float] = time.monotonic) -> None:
        self._entries: dict[Hashable, tuple[float, Any]] = {}
        self._max_size = max_size
        self._clock = clock

    def get(self, key: Hashable) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if self._clock() >= expires_at:
            logger.debug("캐시 만료: %s", key)
            return None
        return value

    def get_stale(self, key: Hashable) -> Any | None:
        entry = self._entries.get(key)
        return entry[1] if entry else None

    def set(self, key: Hashable, value: Any, ttl_seconds: float) -> None:
        if key not in self._entries and len(self._entries) >= self._max_size:
            # 가장 오래 전에 넣은 항목부터 제거
            oldest = next(iter(self._entries))
            del self._entries[oldest]
        self._entries[key] = (self._clock() + ttl_seconds, value)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
