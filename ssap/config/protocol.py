"""SSAP wire protocol constants."""

from __future__ import annotations

# Envelope keys
SSAP_KEY_ID = "id"
SSAP_KEY_TYPE = "type"
SSAP_KEY_URI = "uri"
SSAP_KEY_ERROR = "error"
SSAP_KEY_PAYLOAD = "payload"

# Payload keys
SSAP_KEY_CLIENT_KEY = "client-key"
SSAP_KEY_PAIRING_TYPE = "pairingType"
SSAP_KEY_MANIFEST = "manifest"
SSAP_KEY_PERMISSIONS = "permissions"
SSAP_KEY_RETURN_VALUE = "returnValue"

# Pairing
SSAP_PAIRING_TYPE_PROMPT = "PROMPT"

# Capabilities requested in the register manifest
SSAP_PERMISSIONS: tuple[str, ...] = (
    "LAUNCH",
    "CONTROL_AUDIO",
    "CONTROL_POWER",
    "CONTROL_PLAYBACK",
    "CONTROL_INPUT_TV",
    "READ_TV_CHANNEL_LIST",
    "READ_CURRENT_CHANNEL",
    "READ_RUNNING_APPS",
    "READ_INSTALLED_APPS",
    "READ_INPUT_LIST",
)

SSAP_WS_SCHEMES = ("ws://", "wss://")

__all__ = [
    "SSAP_KEY_ID",
    "SSAP_KEY_TYPE",
    "SSAP_KEY_URI",
    "SSAP_KEY_ERROR",
    "SSAP_KEY_PAYLOAD",
    "SSAP_KEY_CLIENT_KEY",
    "SSAP_KEY_PAIRING_TYPE",
    "SSAP_KEY_MANIFEST",
    "SSAP_KEY_PERMISSIONS",
    "SSAP_KEY_RETURN_VALUE",
    "SSAP_PAIRING_TYPE_PROMPT",
    "SSAP_PERMISSIONS",
    "SSAP_WS_SCHEMES",
]
