"""Device address -> websocket URL."""

from __future__ import annotations

import ipaddress

from ssap.config.protocol import SSAP_WS_SCHEMES


def _is_ipv6_literal(host: str) -> bool:
    try:
        return isinstance(ipaddress.ip_address(host), ipaddress.IPv6Address)
    except ValueError:
        return False


def build_url(address: object, *, port: int) -> str:
    """Return the websocket URL for ``address``.

    Accepts a full ``ws://``/``wss://`` URL (used as-is), ``host:port``, a bare
    hostname or an IP address (str or ``ipaddress`` object). Bare hosts get the
    default SSAP port.
    """
    s = str(address or "").strip()
    if not s:
        raise ValueError("device address is required")
    if s.startswith(SSAP_WS_SCHEMES):
        return s

    host = s.rstrip("/")
    if _is_ipv6_literal(host):
        return f"ws://[{host}]:{port}"
    if host.startswith("[") and host.endswith("]"):
        return f"ws://{host}:{port}"
    if ":" in host:
        return f"ws://{host}"
    return f"ws://{host}:{port}"


__all__ = ["build_url"]
