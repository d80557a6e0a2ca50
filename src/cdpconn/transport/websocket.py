"""WebSocket transport, built on the websocket-client library.

Ping, pong and continuation frames are handled by the library; only
complete text and binary messages, plus the peer's close, surface here.
"""

from __future__ import annotations

import logging
import socket
from typing import Optional

import websocket

from .. import config
from .base import (
    BINARY,
    TEXT,
    Frame,
    Transport,
    TransportConnectError,
    TransportReceiveError,
    TransportSendError,
    TransportTimeout,
)


logger = logging.getLogger(__name__)


class WebSocketTransport(Transport):
    """Exchange text frames with a single WebSocket endpoint at *url*.

    The *connect_timeout* bounds the opening handshake; the *poll_interval*
    bounds how long a single :meth:`recv` blocks, which in turn bounds how
    long shutdown can take if the peer never answers our close frame.

    The socket has a single timeout, so the *poll_interval* also limits how
    long :meth:`send` waits for a peer that has stopped reading. A send that
    makes no progress in that time raises :class:`TransportSendError`.
    """

    def __init__(self, url: str, connect_timeout: Optional[float] = None,
                 poll_interval: Optional[float] = None):
        self.url = url
        self.connect_timeout = config.connect_timeout(connect_timeout)
        self.poll_interval = config.poll_interval(poll_interval)
        self.closing = False
        self._ws: Optional[websocket.WebSocket] = None

    def open(self) -> None:
        logger.info("connecting to %s", self.url)

        try:
            ws = websocket.create_connection(
                self.url,
                timeout=self.connect_timeout,
                enable_multithread=True,
            )
        except websocket.WebSocketBadStatusException as exc:
            raise TransportConnectError(
                f"{self.url}: handshake rejected with status {exc.status_code}"
            ) from exc
        except (websocket.WebSocketException, socket.timeout, OSError) as exc:
            raise TransportConnectError(f"{self.url}: {exc}") from exc

        ws.settimeout(self.poll_interval)
        self._ws = ws
        logger.info("connected to %s", self.url)

    def close(self) -> None:
        if self.closing:
            return
        self.closing = True

        ws = self._ws
        if ws is None or not ws.connected:
            return

        logger.info("closing connection to %s", self.url)

        try:
            ws.send_close()
        except (websocket.WebSocketException, OSError) as exc:
            # The receive side will run into the same dead socket.
            logger.debug("close frame not sent: %s", exc)

    def release(self) -> None:
        ws = self._ws
        if ws is None:
            return

        self._ws = None
        ws.shutdown()

    def send(self, text: str) -> None:
        ws = self._ws
        if ws is None:
            raise TransportSendError(f"{self.url}: not connected")

        try:
            ws.send(text)
        except websocket.WebSocketTimeoutException as exc:
            raise TransportSendError(
                f"{self.url}: peer not reading, send stalled for {self.poll_interval:.2f} sec"
            ) from exc
        except (websocket.WebSocketException, OSError) as exc:
            raise TransportSendError(f"{self.url}: {exc}") from exc

    def recv(self) -> Optional[Frame]:
        ws = self._ws
        if ws is None:
            return None

        try:
            opcode, data = ws.recv_data()
        except websocket.WebSocketTimeoutException as exc:
            raise TransportTimeout(f"no data in {self.poll_interval:.2f} sec") from exc
        except websocket.WebSocketConnectionClosedException:
            logger.info("connection to %s closed by peer", self.url)
            return None
        except (websocket.WebSocketException, OSError) as exc:
            if self.closing:
                return None
            raise TransportReceiveError(f"{self.url}: {exc}") from exc

        if opcode == websocket.ABNF.OPCODE_CLOSE:
            logger.info("close frame received from %s", self.url)
            return None

        if opcode == websocket.ABNF.OPCODE_TEXT:
            if isinstance(data, bytes):
                data = data.decode("utf-8")
            return Frame(TEXT, data)

        return Frame(BINARY, data)

    @property
    def is_open(self) -> bool:
        return self._ws is not None and self._ws.connected and not self.closing
