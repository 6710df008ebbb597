"""Payload shapes that inbound envelopes decode into.

A shape is any class with a ``from_payload`` classmethod taking the raw JSON
object. Callers of ``Connection.request`` pass their own shape for the
operation they invoke; the shapes here cover the handshake and the default.
"""

from __future__ import annotations

from dataclasses import field, dataclass
from typing import Any, Protocol, TypeVar

from ssap.config.protocol import SSAP_KEY_CLIENT_KEY, SSAP_KEY_RETURN_VALUE

ShapeT = TypeVar("ShapeT", bound="PayloadShape")


class PayloadShape(Protocol):
    @classmethod
    def from_payload(cls: type[ShapeT], data: dict[str, Any]) -> ShapeT: ...


@dataclass(frozen=True, slots=True)
class GenericPayload:
    """Fallback for responses with no caller-registered shape."""

    return_value: bool = False
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> GenericPayload:
        return cls(return_value=bool(data.get(SSAP_KEY_RETURN_VALUE, False)), data=dict(data))


@dataclass(frozen=True, slots=True)
class RegisteredPayload:
    client_key: str = ""

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> RegisteredPayload:
        key = data.get(SSAP_KEY_CLIENT_KEY) or ""
        if not isinstance(key, str):
            raise ValueError(f"'{SSAP_KEY_CLIENT_KEY}' must be a string")
        return cls(client_key=key)


@dataclass(frozen=True, slots=True)
class EmptyPayload:
    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> EmptyPayload:
        return cls()


__all__ = [
    "EmptyPayload",
    "GenericPayload",
    "PayloadShape",
    "RegisteredPayload",
    "ShapeT",
]
