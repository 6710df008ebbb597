from __future__ import annotations

import json
import socket
from typing import Any

import pytest
from websockets.asyncio.server import serve

from ssap.client import close, request, register, open_connection
from ssap.errors import ConnectError, NotConnectedError
from ssap.protocol import GenericPayload
from ssap.state import ConnectionState

from conftest import build_settings


async def _device(ws: Any) -> None:
    """Answer like a paired device: prompt ack then registered, echo requests."""
    async for raw in ws:
        msg = json.loads(raw)
        if msg["type"] == "register":
            await ws.send(json.dumps({"id": msg["id"], "type": "response", "payload": {"pairingType": "PROMPT"}}))
            key = msg["payload"]["client-key"] or "issued-key"
            await ws.send(json.dumps({"id": msg["id"], "type": "registered", "payload": {"client-key": key}}))
        elif msg["uri"] == "ssap://system/turnOff":
            await ws.send(json.dumps({"id": msg["id"], "type": "response", "payload": {"returnValue": True}}))
            await ws.close()
        else:
            payload = {"returnValue": True, "echo": msg.get("payload")}
            await ws.send(json.dumps({"id": msg["id"], "type": "response", "payload": payload}))


def _unused_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.mark.asyncio
async def test_round_trip_against_websocket_device() -> None:
    async with serve(_device, "127.0.0.1", 0) as server:
        port = next(iter(server.sockets)).getsockname()[1]
        conn = await open_connection(f"ws://127.0.0.1:{port}", settings=build_settings())
        try:
            assert await register(conn) == "issued-key"
            assert await register(conn, "kept-key") == "kept-key"

            result = await request(conn, "ssap://audio/setVolume", {"volume": 7})
            assert isinstance(result, GenericPayload)
            assert result.data["echo"] == {"volume": 7}
        finally:
            await close(conn)
        assert conn.state is ConnectionState.CLOSED


@pytest.mark.asyncio
async def test_device_closing_connection_is_observed() -> None:
    async with serve(_device, "127.0.0.1", 0) as server:
        port = next(iter(server.sockets)).getsockname()[1]
        conn = await open_connection(f"127.0.0.1:{port}", settings=build_settings())
        try:
            result = await request(conn, "ssap://system/turnOff")
            assert result.return_value is True

            await conn.wait_closed()
            with pytest.raises(NotConnectedError):
                await request(conn, "ssap://audio/volumeUp")
        finally:
            await close(conn)


@pytest.mark.asyncio
async def test_connect_refused() -> None:
    port = _unused_port()
    with pytest.raises(ConnectError):
        await open_connection(f"ws://127.0.0.1:{port}", settings=build_settings())
