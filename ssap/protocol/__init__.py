from .message_type import MessageType
from .codec import decode_message, decode_payload, encode_message, decode_envelope
from .payloads import ShapeT, EmptyPayload, PayloadShape, GenericPayload, RegisteredPayload
from .messages import (
    Error,
    Manifest,
    Response,
    Registered,
    RawEnvelope,
    InboundMessage,
    RequestMessage,
    OutboundMessage,
    RegisterMessage,
)

__all__ = [
    "EmptyPayload",
    "Error",
    "GenericPayload",
    "InboundMessage",
    "Manifest",
    "MessageType",
    "OutboundMessage",
    "PayloadShape",
    "RawEnvelope",
    "RegisterMessage",
    "Registered",
    "RegisteredPayload",
    "RequestMessage",
    "Response",
    "ShapeT",
    "decode_envelope",
    "decode_message",
    "decode_payload",
    "encode_message",
]
