from __future__ import annotations

from .base import SsapError


class CodecError(SsapError):
    """Base class for wire encoding and decoding failures."""


__all__ = ["CodecError"]
