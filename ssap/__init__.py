"""Async client for the SSAP websocket protocol spoken by webOS devices."""

from . import errors
from .state import ClientSettings, ConnectionState
from .runtime import load_settings, configure_logging
from .client import close, request, register, open_connection
from .mux import Connection, PendingTable, RequestIdAllocator
from .protocol import EmptyPayload, PayloadShape, GenericPayload, RegisteredPayload

__all__ = [
    "ClientSettings",
    "Connection",
    "ConnectionState",
    "EmptyPayload",
    "GenericPayload",
    "PayloadShape",
    "PendingTable",
    "RegisteredPayload",
    "RequestIdAllocator",
    "close",
    "configure_logging",
    "errors",
    "load_settings",
    "open_connection",
    "register",
    "request",
]
