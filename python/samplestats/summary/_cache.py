"""Compute-once cache used by the summary wrappers."""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable
from typing import Any


class MemoCache:
    """Parameter-keyed cache; each entry is computed at most once, even across threads."""

    def __init__(self) -> None:
        self._entries: dict[Hashable, Any] = {}
        # re-entrant: one cached computation may read another (std -> variance)
        self._lock = threading.RLock()

    def get(self, key: Hashable, compute: Callable[[], Any]) -> Any:
        with self._lock:
            if key not in self._entries:
                self._entries[key] = compute()
            return self._entries[key]

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
