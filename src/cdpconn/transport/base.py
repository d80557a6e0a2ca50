"""Transport interface.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`cdpconn.protocol` so the protocol remains
transport-agnostic.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterator, Optional, Union

from ..errors import CDPError


logger = logging.getLogger(__name__)

TEXT = "text"
BINARY = "binary"


# Transport agnostic exceptions

class TransportError(CDPError):
    """Base class for all transport-layer errors."""


class TransportTimeout(TransportError):
    """No data arrived within the receive poll interval. Transient."""


class TransportConnectError(TransportError):
    """The transport could not establish a connection."""


class TransportSendError(TransportError):
    """A frame could not be written to the connection."""


class TransportReceiveError(TransportError):
    """The connection failed while waiting for the next frame."""


class Frame:
    """One inbound frame: its *kind* (TEXT or BINARY) and its *data*."""

    def __init__(self, kind: str, data: Union[str, bytes]):
        self.kind = kind
        self.data = data

    def __repr__(self) -> str:
        return f"Frame({self.kind!r}, {self.data!r})"

    @property
    def is_text(self) -> bool:
        return self.kind == TEXT


class Transport(ABC):
    """Minimal contract for a wire-level transport."""

    closing = False

    @abstractmethod
    def open(self) -> None:
        """Establish the underlying connection."""

    @abstractmethod
    def close(self) -> None:
        """Begin tearing down the connection. The receive side winds down
        on its own; :meth:`incoming` ends once it has."""

    @abstractmethod
    def send(self, text: str) -> None:
        """Send one text frame."""

    @abstractmethod
    def recv(self) -> Optional[Frame]:
        """Receive the next frame. Returns None once the peer has closed the
        connection; raises :class:`TransportTimeout` if nothing arrived in
        the poll interval."""

    def release(self) -> None:
        """Free any resources left over after the receive side has ended."""

    def incoming(self) -> Iterator[Frame]:
        """Yield inbound frames in arrival order until the connection closes.

        A :class:`TransportTimeout` is not an error here, it only gives the
        loop a chance to notice that :meth:`close` was called. Any other
        :class:`TransportError` propagates to the consumer.
        """

        try:
            while True:
                try:
                    frame = self.recv()
                except TransportTimeout:
                    if self.closing:
                        logger.debug("no close reply from peer, giving up")
                        return
                    continue

                if frame is None:
                    return

                yield frame
        finally:
            self.release()

    @property
    def is_open(self) -> bool:
        """Whether the transport is currently connected."""
        return False
