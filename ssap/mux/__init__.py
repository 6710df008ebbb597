from .address import build_url
from .ids import RequestIdAllocator
from .connection import ConnectFn, Connection
from .pending import PendingSlot, PendingTable

__all__ = [
    "ConnectFn",
    "Connection",
    "PendingSlot",
    "PendingTable",
    "RequestIdAllocator",
    "build_url",
]
