from __future__ import annotations

from .base import SsapError


class TransportError(SsapError):
    """The websocket could not be established or was lost."""


__all__ = ["TransportError"]
