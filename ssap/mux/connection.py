"""Connection multiplexer: one websocket, many concurrent SSAP requests."""

from __future__ import annotations

import asyncio
import logging
import threading
import contextlib
from typing import Any
from collections.abc import Mapping, Callable, Awaitable

import websockets
from websockets.exceptions import ConnectionClosed, WebSocketException

from ssap.state import ClientSettings, ConnectionState
from ssap.runtime.settings import load_settings
from ssap.errors import (
    UsageError,
    WriteError,
    DecodeError,
    RemoteError,
    ConnectError,
    AlreadyOpenError,
    NotConnectedError,
    ConnectTimeoutError,
    RequestTimeoutError,
    RegisterTimeoutError,
    ConnectionClosedError,
    UnknownMessageTypeError,
)
from ssap.protocol import (
    Error,
    ShapeT,
    Response,
    Registered,
    GenericPayload,
    InboundMessage,
    RequestMessage,
    RegisterMessage,
    decode_payload,
    encode_message,
    decode_envelope,
)

from .address import build_url
from .ids import RequestIdAllocator
from .pending import PendingSlot, PendingTable

logger = logging.getLogger(__name__)

ConnectFn = Callable[..., Awaitable[Any]]

_FAIL_RESPONSE = "device returned a fail response to the request"


class Connection:
    """Client side of one SSAP websocket to a single device.

    ``open`` starts a background task that reads every frame and routes it by
    envelope ID to the caller waiting on it. ``register`` and ``request`` may
    be awaited concurrently from any number of tasks on the same loop. Once
    closed, by ``close``, a read failure or a close frame from the device, a
    connection cannot be reopened.
    """

    def __init__(
        self,
        address: object,
        *,
        settings: ClientSettings | None = None,
        connect_fn: ConnectFn | None = None,
    ) -> None:
        self._settings = settings or load_settings()
        self.url = build_url(address, port=self._settings.transport.port)
        self._connect_fn = connect_fn or websockets.connect
        self._ws: Any = None
        self._ids = RequestIdAllocator()
        self._pending = PendingTable()
        self._write_lock = asyncio.Lock()
        self._state = ConnectionState.UNOPENED
        self._state_lock = threading.Lock()
        self._closed_event = asyncio.Event()
        self._receive_task: asyncio.Task | None = None

    async def __aenter__(self) -> Connection:
        if self.state is ConnectionState.UNOPENED:
            await self.open()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    @property
    def state(self) -> ConnectionState:
        with self._state_lock:
            return self._state

    @property
    def is_open(self) -> bool:
        return self.state is ConnectionState.OPEN

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    # --- lifecycle ---

    async def open(self, timeout_s: float | None = None) -> None:
        """Connect, racing the connect timeout, and start the receive loop."""
        self._check_openable()
        timeout = self._settings.timeouts.connect_timeout_s if timeout_s is None else timeout_s
        try:
            ws = await asyncio.wait_for(self._connect_fn(self.url, **self._ws_options()), timeout=timeout)
        except TimeoutError as exc:
            raise ConnectTimeoutError(f"{self.url}: not connected within {timeout:.1f}s") from exc
        except (OSError, WebSocketException) as exc:
            raise ConnectError(f"{self.url}: {exc}") from exc

        with self._state_lock:
            won = self._state is ConnectionState.UNOPENED
            if won:
                self._ws = ws
                self._state = ConnectionState.OPEN
        if not won:
            with contextlib.suppress(Exception):
                await ws.close()
            self._check_openable()

        self._receive_task = asyncio.create_task(self._receive_loop(ws), name=f"ssap-recv:{self.url}")
        logger.info("connected to %s", self.url)

    async def close(self) -> None:
        """Close the websocket and stop the receive loop. Safe to call repeatedly."""
        self._mark_closed("closed by client")
        ws = self._ws
        if ws is not None:
            try:
                await ws.close()
            except (OSError, WebSocketException):
                logger.debug("error closing websocket to %s", self.url, exc_info=True)

        task = self._receive_task
        if task is not None and task is not asyncio.current_task() and not task.done():
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def wait_closed(self) -> None:
        await self._closed_event.wait()

    # --- operations ---

    async def register(self, client_key: str = "", *, timeout_s: float | None = None) -> str:
        """Run the pairing handshake and return the client key.

        With an empty ``client_key`` the device prompts the user and issues a
        new key; a known key skips the prompt. Replies that are neither
        ``registered`` nor ``error`` (the prompt acknowledgment) are skipped.
        """
        self._require_open()
        timeout = self._settings.timeouts.register_timeout_s if timeout_s is None else timeout_s
        request_id = self._ids.next_id()
        frame = encode_message(RegisterMessage(id=request_id, client_key=client_key or ""))

        slot = self._pending.register(request_id)
        try:
            await self._write(frame)
            try:
                reply = await asyncio.wait_for(self._await_reply(slot, (Registered, Error)), timeout=timeout)
            except TimeoutError:
                raise RegisterTimeoutError(f"no registered response within {timeout:.1f}s") from None
        finally:
            self._pending.remove(request_id)

        if isinstance(reply, Error):
            raise RemoteError(reply.error or _FAIL_RESPONSE, request_id)
        logger.info("registered with %s", self.url)
        return reply.client_key

    async def request(
        self,
        uri: str,
        payload: Mapping[str, Any] | None = None,
        shape: type[ShapeT] | None = None,
        *,
        timeout_s: float | None = None,
    ) -> ShapeT | GenericPayload:
        """Send a request to ``uri`` and return its decoded response payload.

        The payload decodes into ``shape`` (any class with ``from_payload``);
        without one it decodes as ``GenericPayload``.
        """
        if shape is not None and not callable(getattr(shape, "from_payload", None)):
            raise UsageError(f"{shape!r} has no from_payload classmethod")
        self._require_open()
        timeout = self._settings.timeouts.request_timeout_s if timeout_s is None else timeout_s
        request_id = self._ids.next_id()
        frame = encode_message(RequestMessage(id=request_id, uri=uri, payload=payload))

        slot = self._pending.register(request_id, shape)
        try:
            await self._write(frame)
            try:
                reply = await asyncio.wait_for(self._await_reply(slot, (Response, Error)), timeout=timeout)
            except TimeoutError:
                raise RequestTimeoutError(f"no response to {uri} (id={request_id}) within {timeout:.1f}s") from None
        finally:
            self._pending.remove(request_id)

        if isinstance(reply, Error) or reply.error:
            raise RemoteError(reply.error or _FAIL_RESPONSE, request_id)
        return reply.payload

    # --- internal ---

    def _ws_options(self) -> dict[str, Any]:
        transport = self._settings.transport
        return {
            "ping_interval": transport.ping_interval_s,
            "max_size": transport.max_message_bytes,
            "open_timeout": None,
        }

    def _check_openable(self) -> None:
        state = self.state
        if state is ConnectionState.OPEN:
            raise AlreadyOpenError(f"{self.url}: already open")
        if state is ConnectionState.CLOSED:
            raise NotConnectedError(f"{self.url}: connection is closed and cannot be reopened")

    def _require_open(self) -> Any:
        with self._state_lock:
            if self._state is not ConnectionState.OPEN:
                raise NotConnectedError(f"{self.url}: not connected")
            return self._ws

    def _mark_closed(self, reason: str) -> bool:
        with self._state_lock:
            if self._state is ConnectionState.CLOSED:
                return False
            was_open = self._state is ConnectionState.OPEN
            self._state = ConnectionState.CLOSED
        self._closed_event.set()
        waiting = self._pending.fail_all(ConnectionClosedError(f"{self.url}: {reason}"))
        if was_open:
            logger.info("connection to %s closed (%s); %d waiter(s) released", self.url, reason, waiting)
        return True

    async def _write(self, frame: str) -> None:
        ws = self._require_open()
        async with self._write_lock:
            try:
                await ws.send(frame)
            except (OSError, WebSocketException) as exc:
                self._mark_closed(f"write failed: {exc}")
                raise WriteError(f"{self.url}: {exc}") from exc

    @staticmethod
    async def _await_reply(slot: PendingSlot, terminal: tuple[type, ...]) -> InboundMessage:
        while True:
            reply = await slot.get()
            if isinstance(reply, terminal):
                return reply
            logger.debug("id=%s: ignoring intermediate %s", slot.request_id, type(reply).__name__)

    def _on_close_frame(self, code: int, reason: str) -> None:
        # The transport finishes the closing handshake itself.
        self._mark_closed(f"close frame code={code} reason={reason!r}")

    async def _receive_loop(self, ws: Any) -> None:
        try:
            while self.is_open:
                try:
                    raw = await ws.recv()
                except ConnectionClosed as exc:
                    if exc.rcvd is not None:
                        self._on_close_frame(exc.rcvd.code, exc.rcvd.reason)
                    else:
                        self._mark_closed(f"read failed: {exc}")
                    return
                except (OSError, WebSocketException) as exc:
                    self._mark_closed(f"read failed: {exc}")
                    return
                self._dispatch(raw)
        finally:
            self._mark_closed("receive loop stopped")

    def _dispatch(self, raw: str | bytes) -> None:
        try:
            envelope = decode_envelope(raw)
            message = decode_payload(envelope, self._pending.shape_for(envelope.id))
        except UnknownMessageTypeError as exc:
            logger.warning("dropping frame from %s: %s", self.url, exc)
            return
        except DecodeError as exc:
            logger.debug("dropping undecodable frame from %s: %s", self.url, exc)
            return

        if not self._pending.deliver(message.id, message):
            logger.debug("no pending request for id=%s; dropping %s", message.id, envelope.type)


__all__ = ["Connection", "ConnectFn"]
