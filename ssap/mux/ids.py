"""Request ID allocation."""

from __future__ import annotations

import threading


class RequestIdAllocator:
    """Hand out strictly increasing request IDs starting at 1.

    Safe to call from several threads; IDs are never reused, so a pending slot
    can never collide with a newer request.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_id = 0

    @property
    def last_id(self) -> int:
        return self._last_id

    def next_id(self) -> int:
        with self._lock:
            self._last_id += 1
            return self._last_id


__all__ = ["RequestIdAllocator"]
