"""In-memory TTL cache for raw caption cues."""

import time
from typing import Callable

from cachetools import TTLCache

from youtube_mcp.models import Cue

DEFAULT_LANGUAGE_KEY = "default"


class TranscriptCache:
    def __init__(
        self,
        max_size: int = 1000,
        ttl: int = 3600,
        timer: Callable[[], float] = time.monotonic,
    ):
        self._cache: TTLCache = TTLCache(maxsize=max_size, ttl=ttl, timer=timer)
        self._hits = 0
        self._misses = 0

    def _key(self, video_id: str, language: str | None) -> str:
        return f"{video_id}:{(language or '').strip().lower() or DEFAULT_LANGUAGE_KEY}"

    def get(self, video_id: str, language: str | None) -> list[Cue] | None:
        key = self._key(video_id, language)
        result = self._cache.get(key)
        if result is not None:
            self._hits += 1
        else:
            self._misses += 1
        return result

    def set(self, video_id: str, language: str | None, cues: list[Cue]) -> None:
        key = self._key(video_id, language)
        self._cache[key] = list(cues)

    def __contains__(self, item: tuple[str, str | None]) -> bool:
        video_id, language = item
        return self._key(video_id, language) in self._cache

    def stats(self) -> dict:
        return {
            "size": len(self._cache),
            "max_size": self._cache.maxsize,
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / max(self._hits + self._misses, 1) * 100, 1),
        }
