"""Websocket transport configuration (env-resolved constants only)."""

from __future__ import annotations

import os

_DISABLED_VALUES = {"0", "none", "null", "disabled", "disable", "off"}

_SSAP_PORT_RAW = (os.getenv("SSAP_PORT") or "").strip()
try:
    SSAP_PORT: int = int(_SSAP_PORT_RAW) if _SSAP_PORT_RAW else 3000
except Exception:
    SSAP_PORT = 3000
if not 0 < SSAP_PORT < 65536:
    SSAP_PORT = 3000

# The device does not answer websocket pings reliably, so keepalive is off
# unless explicitly requested.
_SSAP_PING_INTERVAL_S_RAW = (os.getenv("SSAP_PING_INTERVAL_S") or "").strip()
if not _SSAP_PING_INTERVAL_S_RAW or _SSAP_PING_INTERVAL_S_RAW.lower() in _DISABLED_VALUES:
    SSAP_PING_INTERVAL_S: float | None = None
else:
    try:
        SSAP_PING_INTERVAL_S = float(_SSAP_PING_INTERVAL_S_RAW)
    except Exception:
        SSAP_PING_INTERVAL_S = None
    if SSAP_PING_INTERVAL_S is not None and SSAP_PING_INTERVAL_S <= 0:
        SSAP_PING_INTERVAL_S = None

# Channel and app lists can be large.
_SSAP_MAX_MESSAGE_BYTES_RAW = (os.getenv("SSAP_MAX_MESSAGE_BYTES") or "").strip()
try:
    SSAP_MAX_MESSAGE_BYTES: int = (
        int(_SSAP_MAX_MESSAGE_BYTES_RAW) if _SSAP_MAX_MESSAGE_BYTES_RAW else 4 * 1024 * 1024
    )
except Exception:
    SSAP_MAX_MESSAGE_BYTES = 4 * 1024 * 1024
SSAP_MAX_MESSAGE_BYTES = max(1024, int(SSAP_MAX_MESSAGE_BYTES))

__all__ = [
    "SSAP_MAX_MESSAGE_BYTES",
    "SSAP_PING_INTERVAL_S",
    "SSAP_PORT",
]
