from __future__ import annotations
from typing import Optional

from .config import CACHE_MAX_ENTRIES, CACHE_TTL_SECONDS
from .schemas import WordMeaning
from .store import MemoryStore


class LookupCache:
    """Recent word meanings (per word and context) and sentence translations."""

    def __init__(self, ttl_seconds: float = CACHE_TTL_SECONDS, store: Optional[MemoryStore] = None):
        self.ttl_seconds = ttl_seconds
        self.store = store if store is not None else MemoryStore(maxsize=CACHE_MAX_ENTRIES)

    def get_word_meaning(self, word: str, context: str) -> Optional[WordMeaning]:
        return self.store.get(f"word:{word}:{context}")

    def set_word_meaning(self, word: str, context: str, meaning: WordMeaning) -> None:
        self.store.put(f"word:{word}:{context}", meaning, self.ttl_seconds)

    def get_translation(self, sentence: str) -> Optional[str]:
        return self.store.get(f"translation:{sentence}")

    def set_translation(self, sentence: str, translation: str) -> None:
        self.store.put(f"translation:{sentence}", translation, self.ttl_seconds)

    def clear(self) -> None:
        self.store.clear()
