"""Call surface for command layers built on top of the multiplexer.

Each helper is a thin wrapper over ``Connection``; errors are raised as
``ssap.errors`` exceptions.
"""

from __future__ import annotations

from typing import Any
from collections.abc import Mapping

from ssap.state import ClientSettings
from ssap.protocol import ShapeT, GenericPayload
from ssap.mux import ConnectFn, Connection


async def open_connection(
    address: object,
    timeout_s: float | None = None,
    *,
    settings: ClientSettings | None = None,
    connect_fn: ConnectFn | None = None,
) -> Connection:
    conn = Connection(address, settings=settings, connect_fn=connect_fn)
    await conn.open(timeout_s)
    return conn


async def register(conn: Connection, client_key: str = "") -> str:
    return await conn.register(client_key)


async def request(
    conn: Connection,
    uri: str,
    payload: Mapping[str, Any] | None = None,
    shape: type[ShapeT] | None = None,
) -> ShapeT | GenericPayload:
    return await conn.request(uri, payload, shape)


async def close(conn: Connection) -> None:
    await conn.close()


__all__ = ["close", "open_connection", "register", "request"]
