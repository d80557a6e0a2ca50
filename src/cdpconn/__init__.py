""" Python client for the Chrome DevTools Protocol. This package holds the
    transport layer of such a client: a persistent WebSocket connection to
    a running browser, typed method calls correlated with their responses,
    and the routing of events, including messages from attached targets,
    to the channels that consume them.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Utility components.

from . import json
from . import config
from . import errors

# Submodules used by multiple other components.

from . import protocol
from . import transport

# Primary public-facing interfaces.

from .connection import Connection, connect
from .errors import CDPError, CallTimeout, ConnectionClosed, ProtocolError, ShapeMismatch
from .transport.channel import Channel, ChannelClosed

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
