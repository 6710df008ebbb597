from __future__ import annotations

from .transport import TransportError


class ConnectError(TransportError):
    """The device refused or could not be reached."""


__all__ = ["ConnectError"]
