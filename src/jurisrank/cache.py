"""Time-boxed result cache for precedent searches.

Entries are never invalidated explicitly: a stale entry is ignored on read
and overwritten by the next miss for its key. The clock is injectable so
TTL behaviour can be tested deterministically.
"""
from __future__ import annotations

import hashlib
import json
import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from jurisrank.schemas import RankedPrecedent, SearchFilters

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 5 * 60


@dataclass(frozen=True)
class CacheEntry:
    results: List[RankedPrecedent]
    timestamp: float


def _sha256(text: str) -> str:
    return hashlib.sha256((text or '').encode('utf-8')).hexdigest()


def make_cache_key(topic: str, context: str, filters: SearchFilters) -> str:
    """Stable key over topic, a hash of the context and the serialized filters."""
    payload = json.dumps(
        [topic or '', _sha256(context), sorted(filters.tipo), sorted(filters.tribunal), filters.search_term or ''],
        ensure_ascii=False,
    )
    return _sha256(payload)


class PrecedentCache:
    """In-memory map of search results with a TTL.

    Unbounded in entry count; lives as long as its owner.
    """

    def __init__(self, ttl_seconds: float = DEFAULT_TTL_SECONDS, clock: Callable[[], float] = time.time) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def now(self) -> float:
        return self._clock()

    def get(self, key: str) -> Optional[List[RankedPrecedent]]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.now() - entry.timestamp >= self.ttl_seconds:
            logger.debug("Cache entry %s expired", key[:12])
            return None
        return entry.results

    def set(self, key: str, results: List[RankedPrecedent]) -> CacheEntry:
        entry = CacheEntry(results=results, timestamp=self.now())
        self._entries[key] = entry
        return entry

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ['PrecedentCache', 'CacheEntry', 'make_cache_key', 'DEFAULT_TTL_SECONDS']
