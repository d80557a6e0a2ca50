""" The receive side of a connection. A single background thread pulls
    frames off the transport, decodes them, and routes each one: responses
    to the :class:`registry.WaitingCallRegistry`, messages nested in
    Target.receivedMessageFromTarget events to the target-messages channel,
    and every other event to the browser-events channel, if there is one.
"""

import contextlib
import logging
import threading

from . import codec
from .base import TransportError
from ..protocol.message import Response, TargetMessage


logger = logging.getLogger(__name__)

RUNNING = 'running'
TERMINATING = 'terminating'
TERMINATED = 'terminated'


class Dispatcher:
    """ Owns the receive half of the *transport*. Runs until the transport
        is exhausted or a fatal error occurs, then fails everything still
        waiting in the *registry* and closes the *target_messages* and
        *browser_events* channels. The *browser_events* channel is optional;
        if it is None other events are logged and dropped.

        :ivar state: One of RUNNING, TERMINATING, or TERMINATED.
        :ivar reason: The exception that terminated the dispatcher, or None
            if the connection ended cleanly.
    """

    def __init__(self, transport, registry, target_messages, browser_events=None):

        self.transport = transport
        self.registry = registry
        self.target_messages = target_messages
        self.browser_events = browser_events

        self.state = RUNNING
        self.reason = None
        self.terminated = threading.Event()

        self.thread = threading.Thread(target=self.run, name='cdpconn.Dispatcher')
        self.thread.daemon = True


    def start(self):
        self.thread.start()


    def join(self, timeout=None):
        """ Wait for the receive thread to finish. Returns True if it has.
        """

        self.thread.join(timeout)
        return not self.thread.is_alive()


    def run(self):

        logger.info("starting message dispatch loop")
        reason = None

        frames = self.transport.incoming()

        try:
            with contextlib.closing(frames):
                for frame in frames:
                    self._dispatch(frame)
        except (TransportError, codec.CodecError) as e:
            reason = e
            logger.error("message dispatch failed: %s", e)
        except Exception as e:
            # Anything else is a bug, but the callers still need to hear
            # that nothing more is coming.
            reason = e
            logger.exception("unexpected error in message dispatch")
        finally:
            self._terminate(reason)

        logger.info("quit message dispatch loop")


    def _dispatch(self, frame):

        if frame.is_text:
            pass
        else:
            raise codec.MalformedMessage('non-text frame', frame.data)

        logger.debug("raw message: %s", frame.data)
        envelope = codec.decode(frame.data)

        if isinstance(envelope, Response):
            self.registry.resolve(envelope)

        elif isinstance(envelope, TargetMessage):
            inner = codec.decode(envelope.message)
            inner.session_id = envelope.session_id
            inner.target_id = envelope.target_id

            if self.target_messages.put(inner) == False:
                logger.warning("target messages channel closed, dropped %r", inner)

        elif self.browser_events is None:
            logger.debug("browser received event: %r", envelope)

        else:
            self.browser_events.put(envelope)


    def _terminate(self, reason):

        self.state = TERMINATING
        self.reason = reason

        self.registry.fail_all(reason)
        self.target_messages.close()

        if self.browser_events is not None:
            self.browser_events.close()

        self.state = TERMINATED
        self.terminated.set()


# end of class Dispatcher


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
