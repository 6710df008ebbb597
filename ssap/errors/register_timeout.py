from __future__ import annotations

from .timeout import SsapTimeoutError


class RegisterTimeoutError(SsapTimeoutError):
    """No registered or error reply arrived before the register timeout."""


__all__ = ["RegisterTimeoutError"]
