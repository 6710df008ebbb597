"""JSON wire codec for SSAP envelopes.

Decoding is two-phase: ``decode_envelope`` pulls out the fields every message
shares, then ``decode_payload`` builds the typed message once the caller knows
which shape a ``response`` should take. The same ``response`` type answers
every remote operation, so the shape can only come from the pending request.
"""

from __future__ import annotations

from typing import Any

import orjson

from ssap.errors import DecodeError, EncodeError, UnknownMessageTypeError
from ssap.config.protocol import SSAP_KEY_ID, SSAP_KEY_TYPE, SSAP_KEY_ERROR, SSAP_KEY_PAYLOAD

from .message_type import MessageType
from .payloads import EmptyPayload, PayloadShape, GenericPayload, RegisteredPayload
from .messages import Error, Response, Registered, RawEnvelope, InboundMessage, OutboundMessage


def encode_message(message: OutboundMessage) -> str:
    """Render an outbound envelope as a websocket text frame."""
    try:
        return orjson.dumps(message.to_wire()).decode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"cannot encode {message.type.value} id={message.id}: {exc}") from exc


def _parse_id(value: Any) -> int:
    # bool is an int subclass; a true/false id is not a request id.
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"envelope '{SSAP_KEY_ID}' must be an integer, got {value!r}")
    return value


def decode_envelope(raw: str | bytes) -> RawEnvelope:
    try:
        msg = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise DecodeError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise DecodeError("envelope must be a JSON object")

    if SSAP_KEY_ID not in msg:
        raise DecodeError(f"envelope missing '{SSAP_KEY_ID}'")
    msg_id = _parse_id(msg[SSAP_KEY_ID])

    msg_type = msg.get(SSAP_KEY_TYPE)
    if not isinstance(msg_type, str) or not msg_type.strip():
        raise DecodeError(f"envelope missing non-empty '{SSAP_KEY_TYPE}'")

    error = msg.get(SSAP_KEY_ERROR)
    if error is None:
        error = ""
    elif not isinstance(error, str):
        error = str(error)

    payload = msg.get(SSAP_KEY_PAYLOAD)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise DecodeError(f"envelope '{SSAP_KEY_PAYLOAD}' must be an object")

    return RawEnvelope(id=msg_id, type=msg_type.strip(), error=error, payload=payload)


def decode_payload(envelope: RawEnvelope, shape: type[PayloadShape] | None = None) -> InboundMessage:
    """Build the typed inbound message for ``envelope``.

    ``shape`` is only consulted for successful ``response`` envelopes; without
    one the payload decodes as ``GenericPayload``. A ``response`` carrying an
    error string keeps the error and no payload.
    """
    msg_type = MessageType.parse(envelope.type)
    try:
        if msg_type is MessageType.RESPONSE:
            if envelope.error:
                return Response(id=envelope.id, payload=None, error=envelope.error)
            decoder = shape or GenericPayload
            return Response(id=envelope.id, payload=decoder.from_payload(envelope.payload), error=envelope.error)
        if msg_type is MessageType.REGISTERED:
            registered = RegisteredPayload.from_payload(envelope.payload)
            return Registered(id=envelope.id, client_key=registered.client_key)
        if msg_type is MessageType.ERROR:
            EmptyPayload.from_payload(envelope.payload)
            return Error(id=envelope.id, error=envelope.error)
    except Exception as exc:
        raise DecodeError(f"cannot decode {envelope.type} payload for id={envelope.id}: {exc}") from exc

    raise UnknownMessageTypeError(f"unrecognized response type {envelope.type!r} for id={envelope.id}")


def decode_message(raw: str | bytes, shape: type[PayloadShape] | None = None) -> InboundMessage:
    return decode_payload(decode_envelope(raw), shape)


__all__ = ["decode_envelope", "decode_message", "decode_payload", "encode_message"]
