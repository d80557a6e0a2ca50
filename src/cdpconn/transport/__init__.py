"""Transport layer: the WebSocket adapter, the codec, and the machinery
that correlates responses and routes events on the receive side."""

from .base import (
    TransportError,
    TransportTimeout,
    TransportConnectError,
    TransportSendError,
    TransportReceiveError,
)

from . import codec
from . import channel
from . import registry
from . import dispatch
