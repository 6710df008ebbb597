"""Connection lifecycle states."""

from __future__ import annotations

from enum import Enum


class ConnectionState(str, Enum):
    """Forward-only lifecycle: UNOPENED -> OPEN -> CLOSED."""

    UNOPENED = "unopened"
    OPEN = "open"
    CLOSED = "closed"


__all__ = ["ConnectionState"]
