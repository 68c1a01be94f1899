"""Optional result cache and request sequencing above the engine.

The engine is deterministic, so two concurrent computations for the same key
produce identical values and last-write-wins on ``put`` is safe.
"""

from __future__ import annotations

import hashlib
import logging
import threading
from collections import OrderedDict
from datetime import date, datetime
from typing import Any, Callable, Hashable

from .models import BirthData

LOG = logging.getLogger(__name__)

GRANULARITIES = ("day", "week", "month", "year")
DEFAULT_MAXSIZE = 256


def birth_fingerprint(birth_data: BirthData) -> str:
    """SHA-256 over the fields that influence a chart. The label is ignored."""

    canonical = "|".join(
        [
            birth_data.utc_instant.isoformat(timespec="seconds"),
            f"{birth_data.latitude:.6f}",
            f"{birth_data.longitude:.6f}",
            birth_data.timezone,
        ]
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def period_label(target: date, granularity: str) -> str:
    """``daily-2024-03-15``, ``weekly-2024-W11``, ``monthly-2024-03`` or ``yearly-2024``."""

    if isinstance(target, datetime):
        target = target.date()
    if granularity == "day":
        return f"daily-{target.isoformat()}"
    if granularity == "week":
        iso_year, iso_week, _ = target.isocalendar()
        return f"weekly-{iso_year}-W{iso_week:02d}"
    if granularity == "month":
        return f"monthly-{target.year:04d}-{target.month:02d}"
    if granularity == "year":
        return f"yearly-{target.year:04d}"
    raise ValueError(f"unknown granularity {granularity!r}; expected one of {', '.join(GRANULARITIES)}")


def cache_key(birth_data: BirthData, target: date, granularity: str = "day") -> str:
    return f"{period_label(target, granularity)}-{birth_fingerprint(birth_data)}"


class ResultCache:
    """Bounded LRU mapping guarded by a lock."""

    def __init__(self, maxsize: int = DEFAULT_MAXSIZE) -> None:
        if maxsize <= 0:
            raise ValueError("maxsize must be positive")
        self.maxsize = maxsize
        self._data: OrderedDict[Hashable, Any] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: Hashable, default: Any = None) -> Any:
        with self._lock:
            if key not in self._data:
                return default
            self._data.move_to_end(key)
            return self._data[key]

    def put(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._data[key] = value
            self._data.move_to_end(key)
            while len(self._data) > self.maxsize:
                evicted, _ = self._data.popitem(last=False)
                LOG.debug("evicted cache entry %s", evicted)

    def get_or_compute(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        """Return the cached value or compute, store and return it.

        ``compute`` runs outside the lock; a racing writer simply overwrites
        an identical value.
        """

        sentinel = object()
        value = self.get(key, sentinel)
        if value is not sentinel:
            return value
        value = compute()
        self.put(key, value)
        return value

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class RequestSequencer:
    """Hands out increasing tokens per slot so the newest request wins.

    A caller takes a token before starting work and checks ``is_current``
    before publishing; a stale result is dropped.
    """

    def __init__(self) -> None:
        self._latest: dict[str, int] = {}
        self._counter = 0
        self._lock = threading.Lock()

    def next_token(self, slot: str = "default") -> int:
        with self._lock:
            self._counter += 1
            self._latest[slot] = self._counter
            return self._counter

    def is_current(self, token: int, slot: str = "default") -> bool:
        with self._lock:
            return self._latest.get(slot) == token

    def publish(self, token: int, value: Any, sink: Callable[[Any], None], slot: str = "default") -> bool:
        """Call ``sink(value)`` only if ``token`` is still current. Returns whether it did."""

        if not self.is_current(token, slot):
            LOG.debug("dropping stale result for slot %s (token %d)", slot, token)
            return False
        sink(value)
        return True

