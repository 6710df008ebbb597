from __future__ import annotations

from .codec import CodecError


class DecodeError(CodecError):
    """An incoming frame could not be parsed into an envelope."""


__all__ = ["DecodeError"]
