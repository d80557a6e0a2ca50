""" The caller-facing side of a DevTools connection. Any number of threads
    may issue calls on a single :class:`Connection` concurrently; each call
    blocks until its own response arrives.
"""

import logging
import threading

from . import config
from .errors import CallTimeout, ConnectionClosed, ProtocolError, ShapeMismatch
from .protocol import fields
from .protocol.message import MethodCall
from .protocol.methods import RawMethod
from .transport import codec
from .transport.base import TransportError
from .transport.channel import Channel
from .transport.dispatch import Dispatcher
from .transport.registry import WaitingCallRegistry
from .transport.websocket import WebSocketTransport


logger = logging.getLogger(__name__)


class Connection:
    """ A connection to the browser-level DevTools endpoint, established
        over an already open *transport*. Messages from attached targets
        are delivered on the *target_messages* channel; if none is supplied
        a new, unbounded :class:`Channel` is created. Other browser events
        are delivered on *browser_events* if it is provided, and discarded
        otherwise.

        :ivar target_messages: The channel of envelopes from attached targets.
        :ivar browser_events: The channel of other events, or None.
        :ivar dispatcher: The :class:`Dispatcher` running the receive side.
    """

    join_timeout = 5

    def __init__(self, transport, target_messages=None, browser_events=None):

        if target_messages is None:
            target_messages = Channel()

        self.transport = transport
        self.target_messages = target_messages
        self.browser_events = browser_events

        self.registry = WaitingCallRegistry()

        # The lock serializes id allocation together with the send, so that
        # ids go out on the wire in increasing order, and so that frames from
        # concurrent callers never interleave. An id is only spent once its
        # call has been encoded.

        self.send_lock = threading.Lock()
        self.next_id = 0
        self.closed = False

        self.dispatcher = Dispatcher(transport, self.registry, target_messages, browser_events)
        self.dispatcher.start()


    def __enter__(self):
        return self


    def __exit__(self, *exc_info):
        self.close()


    def __del__(self):
        # A connection must not outlive its owner with the receive thread
        # still attached to the socket. Never wait here, though.
        if getattr(self, 'closed', True) == False:
            self.transport.close()


    def call(self, method, timeout=None):
        """ Invoke *method* and return its decoded result. The *method* is
            typically a :class:`protocol.methods.Method` instance; anything
            with a *name*, a :func:`params` method returning the call
            parameters, and a :func:`decode` method accepting the raw result
            will do. If *timeout* is specified, wait no more than that many
            seconds for the response.

            Raises :class:`ProtocolError` if the browser rejected the call,
            :class:`ShapeMismatch` if the result could not be decoded, or
            :class:`ConnectionClosed` if the connection is gone.
        """

        name = method.name
        params = method.params()

        with self.send_lock:
            if self.closed:
                raise ConnectionClosed('connection closed by caller')

            call_id = self.next_id
            text = codec.encode(MethodCall(call_id, name, params))
            self.next_id += 1

            pending = self.registry.register(call_id)

            logger.debug("sending message: %s", text)

            try:
                self.transport.send(text)
            except TransportError:
                self.registry.discard(call_id)
                raise

        try:
            response = pending.wait(timeout)
        except CallTimeout:
            # Given up on; a response arriving later is dropped.
            self.registry.discard(call_id)
            raise

        logger.debug("method caller got response %d", call_id)

        error = response.error

        if error is not None:
            raise ProtocolError(error[fields.CODE], error[fields.MESSAGE], error.get(fields.DATA))

        try:
            return method.decode(response.result)
        except (KeyError, TypeError, ValueError) as e:
            raise ShapeMismatch('%s: %s' % (name, e)) from e


    def send_command(self, name, params=None, timeout=None):
        """ Invoke the method *name* with the given *params*, and return the
            raw result dictionary. See :func:`call`.
        """

        return self.call(RawMethod(name, params), timeout)


    def close(self):
        """ Shut down the connection and wait for the receive thread to
            finish. Any calls still waiting for a response will raise
            :class:`ConnectionClosed`. Calling :func:`close` more than once
            is harmless.
        """

        with self.send_lock:
            already = self.closed
            self.closed = True

            if already == False:
                self.transport.close()

        # The receive thread may be blocked handing a message to a full
        # bounded channel; closing the channels releases it. Whatever is
        # already queued can still be drained.

        self._close_channels()

        if self.dispatcher.join(self.join_timeout) == False:
            logger.warning("receive thread did not stop within %d sec", self.join_timeout)
            self.registry.fail_all(ConnectionClosed('connection closed by caller'))

        self.transport.release()


    def _close_channels(self):

        self.target_messages.close()

        if self.browser_events is not None:
            self.browser_events.close()


    @property
    def is_open(self):
        return self.closed == False and self.dispatcher.terminated.is_set() == False


# end of class Connection



def connect(browser_id, host=None, port=None, target_messages=None, browser_events=None,
            connect_timeout=None, poll_interval=None):
    """ Open a WebSocket to the browser identified by *browser_id* and
        return a new :class:`Connection` over it. The *host* and *port*
        default to the values from :mod:`cdpconn.config`. Raises
        :class:`transport.TransportConnectError` if the endpoint cannot be
        reached.
    """

    url = config.url(browser_id, host, port)

    transport = WebSocketTransport(url, connect_timeout, poll_interval)
    transport.open()

    return Connection(transport, target_messages, browser_events)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
