from __future__ import annotations

from .usage import UsageError


class DuplicateRequestIdError(UsageError):
    """A pending slot already exists for the request ID."""


__all__ = ["DuplicateRequestIdError"]
