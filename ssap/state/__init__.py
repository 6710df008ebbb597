from .connection import ConnectionState
from .settings import ClientSettings, TimeoutSettings, TransportSettings

__all__ = ["ClientSettings", "ConnectionState", "TimeoutSettings", "TransportSettings"]
