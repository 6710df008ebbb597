from __future__ import annotations

from .base import SsapError


class SsapTimeoutError(SsapError, TimeoutError):
    """A wait ran out of time. The connection itself stays usable."""


__all__ = ["SsapTimeoutError"]
