from __future__ import annotations

from .timeout import SsapTimeoutError


class ConnectTimeoutError(SsapTimeoutError):
    """The websocket did not open before the connect timeout."""


__all__ = ["ConnectTimeoutError"]
