from __future__ import annotations

from .transport import TransportError


class ConnectionClosedError(TransportError):
    """The connection closed while a caller was waiting on it."""


__all__ = ["ConnectionClosedError"]
