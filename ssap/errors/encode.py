from __future__ import annotations

from .codec import CodecError


class EncodeError(CodecError):
    """An outgoing envelope could not be represented as JSON."""


__all__ = ["EncodeError"]
