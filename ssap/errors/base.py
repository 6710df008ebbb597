from __future__ import annotations


class SsapError(Exception):
    """Base class for all SSAP client errors."""


__all__ = ["SsapError"]
