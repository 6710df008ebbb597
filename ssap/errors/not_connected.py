from __future__ import annotations

from .usage import UsageError


class NotConnectedError(UsageError):
    """The connection is not open."""


__all__ = ["NotConnectedError"]
