from __future__ import annotations

from .transport import TransportError


class WriteError(TransportError):
    """Writing a frame to the websocket failed."""


__all__ = ["WriteError"]
