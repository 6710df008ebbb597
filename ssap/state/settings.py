"""Client settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TimeoutSettings:
    connect_timeout_s: float
    register_timeout_s: float
    request_timeout_s: float


@dataclass(frozen=True, slots=True)
class TransportSettings:
    port: int
    ping_interval_s: float | None
    max_message_bytes: int


@dataclass(frozen=True, slots=True)
class ClientSettings:
    timeouts: TimeoutSettings
    transport: TransportSettings


__all__ = [
    "ClientSettings",
    "TimeoutSettings",
    "TransportSettings",
]
