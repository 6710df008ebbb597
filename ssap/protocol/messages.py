"""Typed SSAP envelopes.

Outbound messages render themselves to a wire dict. Inbound messages form a
closed union over the three reply types; only ``Response`` carries a payload
whose shape depends on the request it answers.
"""

from __future__ import annotations

from typing import Any, Union
from collections.abc import Mapping
from dataclasses import field, dataclass

from ssap.config.protocol import (
    SSAP_KEY_ID,
    SSAP_KEY_URI,
    SSAP_KEY_TYPE,
    SSAP_KEY_PAYLOAD,
    SSAP_PERMISSIONS,
    SSAP_KEY_MANIFEST,
    SSAP_KEY_CLIENT_KEY,
    SSAP_KEY_PERMISSIONS,
    SSAP_KEY_PAIRING_TYPE,
    SSAP_PAIRING_TYPE_PROMPT,
)

from .message_type import MessageType


@dataclass(frozen=True, slots=True)
class Manifest:
    permissions: tuple[str, ...] = SSAP_PERMISSIONS

    def to_wire(self) -> dict[str, Any]:
        return {SSAP_KEY_PERMISSIONS: list(self.permissions)}


@dataclass(frozen=True, slots=True)
class RegisterMessage:
    id: int
    client_key: str = ""
    manifest: Manifest = field(default_factory=Manifest)
    pairing_type: str = SSAP_PAIRING_TYPE_PROMPT

    type = MessageType.REGISTER

    def to_wire(self) -> dict[str, Any]:
        return {
            SSAP_KEY_ID: self.id,
            SSAP_KEY_TYPE: self.type.value,
            SSAP_KEY_PAYLOAD: {
                SSAP_KEY_PAIRING_TYPE: self.pairing_type,
                SSAP_KEY_MANIFEST: self.manifest.to_wire(),
                SSAP_KEY_CLIENT_KEY: self.client_key,
            },
        }


@dataclass(frozen=True, slots=True)
class RequestMessage:
    id: int
    uri: str
    payload: Mapping[str, Any] | None = None

    type = MessageType.REQUEST

    def to_wire(self) -> dict[str, Any]:
        wire: dict[str, Any] = {
            SSAP_KEY_ID: self.id,
            SSAP_KEY_TYPE: self.type.value,
            SSAP_KEY_URI: self.uri,
        }
        if self.payload is not None:
            wire[SSAP_KEY_PAYLOAD] = dict(self.payload)
        return wire


@dataclass(frozen=True, slots=True)
class RawEnvelope:
    """Common envelope fields; the payload is decoded in a second step."""

    id: int
    type: str
    error: str = ""
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Registered:
    id: int
    client_key: str


@dataclass(frozen=True, slots=True)
class Response:
    id: int
    payload: Any
    error: str = ""


@dataclass(frozen=True, slots=True)
class Error:
    id: int
    error: str


OutboundMessage = Union[RegisterMessage, RequestMessage]
InboundMessage = Union[Registered, Response, Error]

__all__ = [
    "Error",
    "InboundMessage",
    "Manifest",
    "OutboundMessage",
    "RawEnvelope",
    "RegisterMessage",
    "Registered",
    "RequestMessage",
    "Response",
]
