"""
Blaseball socket transport: cookie-authenticated websocket to the
Socket.IO (Engine.IO v3) endpoint.

Engine.IO control packets are handled here and never reach the decoder:
the open packet sets the heartbeat interval and starts a ping task, pongs
and the namespace ack are dropped, and a close/disconnect packet ends the
stream like a websocket close would.
"""
import asyncio
import json
import logging
from typing import Optional

import websockets
import websockets.exceptions

from blaseball.config import (
    BLASEBALL_WS_URL,
    DEFAULT_PING_INTERVAL_S,
    WS_CLOSE_TIMEOUT_S,
    WS_MAX_SIZE,
)
from blaseball.errors import TransportClosed, TransportError

log = logging.getLogger("blaseball.ws")

# Engine.IO v3 packet types (first character of a text frame)
EIO_OPEN = "0"
EIO_CLOSE = "1"
EIO_PING = "2"
EIO_PONG = "3"
SIO_CONNECT = "40"
SIO_DISCONNECT = "41"


class BlaseballSocket:
    """Frame source for the update loop: ``next_frame()`` and ``close()``."""

    def __init__(self, ws, ping_interval: float = DEFAULT_PING_INTERVAL_S) -> None:
        self._ws = ws
        self._ping_interval = ping_interval
        self._ping_task: Optional[asyncio.Task] = None
        self._closed = False
        self.session_id = ""
        self.pongs = 0

    @classmethod
    async def connect(cls, cookie: str, url: str = BLASEBALL_WS_URL) -> "BlaseballSocket":
        log.info("connecting to %s", url)
        try:
            ws = await websockets.connect(
                url,
                additional_headers={"Cookie": cookie},
                ping_interval=20,
                ping_timeout=30,
                close_timeout=WS_CLOSE_TIMEOUT_S,
                max_size=WS_MAX_SIZE,
            )
        except websockets.exceptions.InvalidStatus as e:
            resp = e.response
            log.error("handshake rejected: HTTP %d %s", resp.status_code, resp.reason_phrase)
            if resp.body:
                log.error("response body: %s", resp.body[:500].decode("utf-8", "replace"))
            raise TransportError(f"handshake rejected: HTTP {resp.status_code}") from e
        except (OSError, asyncio.TimeoutError, websockets.exceptions.WebSocketException) as e:
            raise TransportError(f"connect failed: {e}") from e

        log.info("connected")
        return cls(ws)

    @property
    def ping_interval(self) -> float:
        return self._ping_interval

    async def next_frame(self) -> str | bytes:
        """Block until the next application frame arrives.

        Raises TransportClosed when the connection ends, TransportError on
        any other read failure.
        """
        while True:
            try:
                frame = await self._ws.recv()
            except websockets.exceptions.ConnectionClosed as e:
                raise TransportClosed(str(e) or "connection closed") from e
            except Exception as e:
                raise TransportError(f"read failed: {e}") from e

            if isinstance(frame, str) and self._handle_control(frame):
                continue
            return frame

    def _handle_control(self, frame: str) -> bool:
        """Consume an Engine.IO/Socket.IO control packet. False for anything else."""
        if frame.startswith(EIO_OPEN):
            self._handle_open(frame[1:])
            return True
        if frame.startswith(EIO_PONG):
            self.pongs += 1
            return True
        if frame.startswith(SIO_CONNECT):
            log.info("socket.io namespace connected")
            return True
        if frame.startswith(SIO_DISCONNECT) or frame == EIO_CLOSE:
            raise TransportClosed(f"server sent disconnect packet {frame!r}")
        return False

    def _handle_open(self, payload: str) -> None:
        try:
            info = json.loads(payload)
            self.session_id = str(info.get("sid", ""))
            interval_ms = info.get("pingInterval")
            if isinstance(interval_ms, (int, float)) and interval_ms > 0:
                self._ping_interval = interval_ms / 1000.0
        except (json.JSONDecodeError, AttributeError):
            log.warning("unreadable open packet: %s", payload[:200])

        log.info("engine.io open sid=%s ping_interval=%.1fs",
                 self.session_id, self._ping_interval)
        if self._ping_task is None:
            self._ping_task = asyncio.create_task(self._ping_loop(), name="eio_ping")

    async def _ping_loop(self) -> None:
        while not self._closed:
            await asyncio.sleep(self._ping_interval)
            try:
                await self._ws.send(EIO_PING)
            except websockets.exceptions.ConnectionClosed:
                log.debug("ping loop stopped: connection closed")
                return
            except Exception as e:
                log.warning("engine.io ping failed, stopping pings: %s", e)
                return

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._ping_task is not None:
            self._ping_task.cancel()
            await asyncio.gather(self._ping_task, return_exceptions=True)
        await self._ws.close()
        log.info("blaseball socket closed")
