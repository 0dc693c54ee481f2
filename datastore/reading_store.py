from __future__ import annotations

from dataclasses import replace
from threading import Lock
from typing import Any, Mapping, Optional

from models.records import READING_FIELDS, Reading


class ReadingStore:
    """In-memory holder for the single current reading.

    State lives only for the lifetime of the process.
    """

    def __init__(self, initial: Optional[Reading] = None) -> None:
        self._reading = initial if initial is not None else Reading()
        self._lock = Lock()

    def merge(self, partial: Mapping[str, Any]) -> None:
        with self._lock:
            self._merge_locked(partial)

    def snapshot(self) -> Reading:
        with self._lock:
            return self._reading

    def apply(self, partial: Mapping[str, Any]) -> Reading:
        """Merge ``partial`` and return the resulting snapshot atomically."""
        with self._lock:
            self._merge_locked(partial)
            return self._reading

    def _merge_locked(self, partial: Mapping[str, Any]) -> None:
        changes = {name: partial[name] for name in READING_FIELDS if name in partial}
        if changes:
            self._reading = replace(self._reading, **changes)
