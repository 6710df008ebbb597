"""Error types raised by the SSAP client.

Transport errors are terminal for the connection they occur on. Timeouts only
fail the call that was waiting. Codec errors raised inside the receive loop are
logged and dropped; they never reach a caller.
"""

from .base import SsapError
from .codec import CodecError
from .usage import UsageError
from .write import WriteError
from .decode import DecodeError
from .encode import EncodeError
from .remote import RemoteError
from .connect import ConnectError
from .timeout import SsapTimeoutError
from .transport import TransportError
from .already_open import AlreadyOpenError
from .closed import ConnectionClosedError
from .not_connected import NotConnectedError
from .duplicate_id import DuplicateRequestIdError
from .connect_timeout import ConnectTimeoutError
from .request_timeout import RequestTimeoutError
from .unknown_type import UnknownMessageTypeError
from .register_timeout import RegisterTimeoutError

__all__ = [
    "AlreadyOpenError",
    "CodecError",
    "ConnectError",
    "ConnectTimeoutError",
    "ConnectionClosedError",
    "DecodeError",
    "DuplicateRequestIdError",
    "EncodeError",
    "NotConnectedError",
    "RegisterTimeoutError",
    "RemoteError",
    "RequestTimeoutError",
    "SsapError",
    "SsapTimeoutError",
    "TransportError",
    "UnknownMessageTypeError",
    "UsageError",
    "WriteError",
]
