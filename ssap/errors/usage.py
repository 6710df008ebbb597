from __future__ import annotations

from .base import SsapError


class UsageError(SsapError):
    """An operation was attempted in a state that does not allow it."""


__all__ = ["UsageError"]
