"""Configuration module exports (env-resolved constants only)."""

from .transport import SSAP_PORT
from .timeouts import (
    SSAP_CONNECT_TIMEOUT_S,
    SSAP_REQUEST_TIMEOUT_S,
    SSAP_REGISTER_TIMEOUT_S,
)

__all__ = [
    "SSAP_CONNECT_TIMEOUT_S",
    "SSAP_PORT",
    "SSAP_REGISTER_TIMEOUT_S",
    "SSAP_REQUEST_TIMEOUT_S",
]
