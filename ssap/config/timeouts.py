"""Timeout policy for the connection multiplexer (env-resolved constants only)."""

from __future__ import annotations

import os

_DEFAULT_CONNECT_TIMEOUT_S = 5.0
_DEFAULT_REGISTER_TIMEOUT_S = 60.0
_DEFAULT_REQUEST_TIMEOUT_S = 10.0


def _positive_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


# Opening the websocket races this timer.
SSAP_CONNECT_TIMEOUT_S: float = _positive_float("SSAP_CONNECT_TIMEOUT_S", _DEFAULT_CONNECT_TIMEOUT_S)

# The register handshake may wait on a user confirming the prompt on screen.
SSAP_REGISTER_TIMEOUT_S: float = _positive_float("SSAP_REGISTER_TIMEOUT_S", _DEFAULT_REGISTER_TIMEOUT_S)

SSAP_REQUEST_TIMEOUT_S: float = _positive_float("SSAP_REQUEST_TIMEOUT_S", _DEFAULT_REQUEST_TIMEOUT_S)

__all__ = [
    "SSAP_CONNECT_TIMEOUT_S",
    "SSAP_REGISTER_TIMEOUT_S",
    "SSAP_REQUEST_TIMEOUT_S",
]
