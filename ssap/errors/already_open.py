from __future__ import annotations

from .usage import UsageError


class AlreadyOpenError(UsageError):
    """open() was called on a connection that is already open."""


__all__ = ["AlreadyOpenError"]
