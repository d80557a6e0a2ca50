"""
cdpconn Protocol Layer
======================

This package defines the Chrome DevTools Protocol envelopes and the typed
methods carried inside them. It knows nothing about WebSockets, threads,
or how a reply finds its way back to a caller.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

User Code
    │
    ▼
Connection Facade (connection.py)
    - call()
    - send_command()

    │
    ▼
Typed Methods (methods.py)
    Each method pairs its parameters with a decoder for its result

    │
    ▼
Message Model (message.py)
    - MethodCall
    - Response
    - Event
    - TargetMessage

    │
    ▼
Field Vocabulary (fields.py)
    Canonical names for envelope keys

---------------------------------------------------------------------

Below the Protocol Layer (for context)
--------------------------------------

Codec (transport/codec.py)
    Maps envelopes <-> JSON text

Registry / Dispatcher (transport/registry.py, transport/dispatch.py)
    Correlate responses, route events

Transport (transport/websocket.py)
    Moves text frames

---------------------------------------------------------------------
"""

from . import fields
from . import message
from . import methods


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
