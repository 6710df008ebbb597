"""Pending-request table: request ID -> delivery slot."""

from __future__ import annotations

import asyncio
import threading
from dataclasses import field, dataclass

from ssap.protocol import PayloadShape, InboundMessage
from ssap.errors import DuplicateRequestIdError


@dataclass(slots=True)
class PendingSlot:
    request_id: int
    shape: type[PayloadShape] | None = None
    queue: asyncio.Queue = field(default_factory=asyncio.Queue)

    async def get(self) -> InboundMessage:
        item = await self.queue.get()
        if isinstance(item, BaseException):
            raise item
        return item


class PendingTable:
    """Map outstanding request IDs to the slot their reply is delivered to.

    Entries are mutated under a lock. Slot queues belong to the event loop the
    connection runs on, so ``deliver`` and ``fail_all`` must be called from it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._slots: dict[int, PendingSlot] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._slots)

    def __contains__(self, request_id: object) -> bool:
        with self._lock:
            return request_id in self._slots

    def register(self, request_id: int, shape: type[PayloadShape] | None = None) -> PendingSlot:
        slot = PendingSlot(request_id=request_id, shape=shape)
        with self._lock:
            if request_id in self._slots:
                raise DuplicateRequestIdError(f"request id {request_id} is already pending")
            self._slots[request_id] = slot
        return slot

    def shape_for(self, request_id: int) -> type[PayloadShape] | None:
        with self._lock:
            slot = self._slots.get(request_id)
        return slot.shape if slot is not None else None

    def deliver(self, request_id: int, message: InboundMessage) -> bool:
        with self._lock:
            slot = self._slots.get(request_id)
        if slot is None:
            return False
        slot.queue.put_nowait(message)
        return True

    def remove(self, request_id: int) -> None:
        with self._lock:
            self._slots.pop(request_id, None)

    def fail_all(self, exc: BaseException) -> int:
        """Wake every waiter with ``exc``; returns how many were waiting."""
        with self._lock:
            slots = list(self._slots.values())
        for slot in slots:
            slot.queue.put_nowait(exc)
        return len(slots)


__all__ = ["PendingSlot", "PendingTable"]
