from __future__ import annotations

import sys
import json
import asyncio
from pathlib import Path
from typing import Any
from collections.abc import Callable, Iterable, AsyncIterator

import pytest
import pytest_asyncio
from websockets.exceptions import ConnectionClosedOK

from ssap.mux import Connection
from ssap.state import ClientSettings, TimeoutSettings, TransportSettings

Responder = Callable[[dict[str, Any]], Iterable[Any]]


def pytest_configure() -> None:
    # Keep `import ssap...` working when running `pytest` from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


class FakeWebSocket:
    """In-memory stand-in for a websockets client connection.

    Frames pushed with ``push`` are returned by ``recv`` in order; pushing an
    exception makes ``recv`` raise it. ``responder`` sees every sent envelope
    and returns the replies to queue for it.
    """

    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []
        self.close_calls = 0
        self.send_error: BaseException | None = None
        self.responder: Responder | None = None
        self._inbox: asyncio.Queue = asyncio.Queue()
        self._sent_signal = asyncio.Event()

    def push(self, item: Any) -> None:
        if not isinstance(item, (str, bytes, BaseException)):
            item = json.dumps(item)
        self._inbox.put_nowait(item)

    async def send(self, frame: str) -> None:
        if self.send_error is not None:
            raise self.send_error
        msg = json.loads(frame)
        self.sent.append(msg)
        self._sent_signal.set()
        if self.responder is not None:
            for reply in self.responder(msg):
                self.push(reply)

    async def recv(self) -> str | bytes:
        item = await self._inbox.get()
        if isinstance(item, BaseException):
            raise item
        return item

    async def close(self) -> None:
        self.close_calls += 1
        self._inbox.put_nowait(ConnectionClosedOK(None, None))

    async def wait_sent(self, count: int, timeout: float = 1.0) -> None:
        async def _wait() -> None:
            while len(self.sent) < count:
                self._sent_signal.clear()
                await self._sent_signal.wait()

        await asyncio.wait_for(_wait(), timeout=timeout)


def build_settings(
    *,
    connect_timeout_s: float = 1.0,
    register_timeout_s: float = 1.0,
    request_timeout_s: float = 1.0,
) -> ClientSettings:
    return ClientSettings(
        timeouts=TimeoutSettings(
            connect_timeout_s=connect_timeout_s,
            register_timeout_s=register_timeout_s,
            request_timeout_s=request_timeout_s,
        ),
        transport=TransportSettings(port=3000, ping_interval_s=None, max_message_bytes=1024 * 1024),
    )


@pytest.fixture
def fake_ws() -> FakeWebSocket:
    return FakeWebSocket()


@pytest_asyncio.fixture
async def make_connection() -> AsyncIterator[Callable[..., Connection]]:
    created: list[Connection] = []

    def _make(ws: Any, **timeouts: float) -> Connection:
        async def _connect(url: str, **_options: Any) -> Any:
            return ws

        conn = Connection("192.0.2.10", settings=build_settings(**timeouts), connect_fn=_connect)
        created.append(conn)
        return conn

    yield _make

    for conn in created:
        await conn.close()
