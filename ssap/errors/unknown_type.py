from __future__ import annotations

from .decode import DecodeError


class UnknownMessageTypeError(DecodeError):
    """An incoming envelope declared a type this client does not handle."""


__all__ = ["UnknownMessageTypeError"]
