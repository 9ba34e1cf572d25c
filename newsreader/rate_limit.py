from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

from .config import (
    ARTICLE_RATE_LIMIT, TRANSLATE_RATE_LIMIT, WORD_RATE_LIMIT, RATE_LIMIT_WINDOW_SECONDS,
)
from .store import KeyValueStore


@dataclass(frozen=True)
class RateLimitConfig:
    max_requests: int
    window_seconds: int


@dataclass(frozen=True)
class RateLimitResult:
    allowed: bool
    remaining: int


RATE_LIMITS: Dict[str, RateLimitConfig] = {
    "article": RateLimitConfig(ARTICLE_RATE_LIMIT, RATE_LIMIT_WINDOW_SECONDS),
    "translate": RateLimitConfig(TRANSLATE_RATE_LIMIT, RATE_LIMIT_WINDOW_SECONDS),
    "word": RateLimitConfig(WORD_RATE_LIMIT, RATE_LIMIT_WINDOW_SECONDS),
}


class RateLimiter:
    """
    Request counter per (client, endpoint type) kept in a TTL store.

    check_limit only reads; callers increment after a successful call, so
    failed requests are not counted. Each increment restarts the window.
    """

    def __init__(self, store: KeyValueStore, config: RateLimitConfig):
        self.store = store
        self.config = config

    @staticmethod
    def _key(client: str, kind: str) -> str:
        return f"rate:{kind}:{client}"

    def _count(self, key: str) -> int:
        try:
            return int(self.store.get(key) or 0)
        except (TypeError, ValueError):
            return 0

    def check_limit(self, client: str, kind: str) -> RateLimitResult:
        current = self._count(self._key(client, kind))
        if current >= self.config.max_requests:
            return RateLimitResult(allowed=False, remaining=0)
        return RateLimitResult(allowed=True, remaining=self.config.max_requests - current)

    def increment(self, client: str, kind: str) -> None:
        self.store.incr(self._key(client, kind), self.config.window_seconds)
