from __future__ import annotations

from dataclasses import dataclass

from .base import SsapError


@dataclass(frozen=True, slots=True)
class RemoteError(SsapError):
    """Raised when the device answers a request or handshake with an error."""

    message: str
    request_id: int | None = None

    def __str__(self) -> str:
        return self.message


__all__ = ["RemoteError"]
