"""Load client settings.

Configuration values are resolved from the environment in `ssap/config/*` and
exposed here as structured dataclasses for the rest of the client.
"""

from __future__ import annotations

from ssap.state.settings import ClientSettings, TimeoutSettings, TransportSettings
from ssap.config.transport import SSAP_PORT, SSAP_PING_INTERVAL_S, SSAP_MAX_MESSAGE_BYTES
from ssap.config.timeouts import (
    SSAP_CONNECT_TIMEOUT_S,
    SSAP_REQUEST_TIMEOUT_S,
    SSAP_REGISTER_TIMEOUT_S,
)


def load_settings() -> ClientSettings:
    return ClientSettings(
        timeouts=TimeoutSettings(
            connect_timeout_s=SSAP_CONNECT_TIMEOUT_S,
            register_timeout_s=SSAP_REGISTER_TIMEOUT_S,
            request_timeout_s=SSAP_REQUEST_TIMEOUT_S,
        ),
        transport=TransportSettings(
            port=SSAP_PORT,
            ping_interval_s=SSAP_PING_INTERVAL_S,
            max_message_bytes=SSAP_MAX_MESSAGE_BYTES,
        ),
    )


__all__ = ["load_settings"]
