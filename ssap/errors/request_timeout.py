from __future__ import annotations

from .timeout import SsapTimeoutError


class RequestTimeoutError(SsapTimeoutError):
    """No reply arrived before the request timeout."""


__all__ = ["RequestTimeoutError"]
