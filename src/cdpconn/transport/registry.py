""" The waiting call registry: the bookkeeping that ties a response
    arriving on the receive thread back to the caller that is blocked
    waiting for it.
"""

import logging
import threading

from ..errors import CallTimeout, ConnectionClosed


logger = logging.getLogger(__name__)


class PendingCall:
    """ Single-use delivery slot for one response. The receive thread
        completes it exactly once, either with a response or a failure;
        the originating caller blocks in :func:`wait` until that happens.
    """

    def __init__(self, id):

        self.id = id
        self.response = None
        self.failure = None
        self.event = threading.Event()


    def __repr__(self):
        return 'PendingCall(%d)' % (self.id)


    def poll(self):
        """ Return True if the call is complete, otherwise return False.
        """

        return self.event.is_set()


    def wait(self, timeout=None):
        """ Block until the response arrives, and return it. If the connection
            closed first, raise :class:`ConnectionClosed`; if *timeout* seconds
            elapse first, raise :class:`CallTimeout`. A *timeout* of None
            blocks indefinitely.
        """

        if self.event.wait(timeout) == False:
            raise CallTimeout('no response to call %d in %.2f sec' % (self.id, timeout))

        if self.failure is not None:
            raise ConnectionClosed(reason=self.failure.reason) from self.failure.reason

        return self.response


    def _complete(self, response):
        self.response = response
        self.event.set()


    def _fail(self, failure):
        self.failure = failure
        self.event.set()


# end of class PendingCall



class WaitingCallRegistry:
    """ Map of call id to :class:`PendingCall`. Callers :func:`register`
        before sending; the receive thread :func:`resolve` s each response
        as it arrives, and calls :func:`fail_all` when it stops. All three
        may interleave freely, the map is guarded by a single lock.

        Once :func:`fail_all` has been invoked the registry stays closed:
        any further :func:`register` raises :class:`ConnectionClosed`.
    """

    def __init__(self):

        self.pending = dict()
        self.failure = None
        self.lock = threading.Lock()


    def __contains__(self, id):
        with self.lock:
            return id in self.pending


    def __len__(self):
        with self.lock:
            return len(self.pending)


    @property
    def closed(self):
        return self.failure is not None


    def register(self, id):
        """ Insert and return a fresh :class:`PendingCall` for the call *id*.
        """

        pending = PendingCall(id)

        with self.lock:
            if self.failure is not None:
                raise ConnectionClosed(reason=self.failure.reason) from self.failure.reason

            if id in self.pending:
                raise ValueError('call id already registered: ' + str(id))

            self.pending[id] = pending

        return pending


    def discard(self, id):
        """ Remove the registration for *id*, if any, without completing it.
            Used when the request never made it onto the wire, or the caller
            has given up waiting.
        """

        with self.lock:
            self.pending.pop(id, None)


    def resolve(self, response):
        """ Hand *response* to the caller waiting on its id, and retire the
            registration. A response nobody is waiting for is dropped.
        """

        with self.lock:
            pending = self.pending.pop(response.id, None)

        if pending is None:
            logger.warning("dropping response %d, no caller is waiting for it", response.id)
            return

        pending._complete(response)


    def fail_all(self, reason=None):
        """ Fail every outstanding call, and close the registry to new ones.
            The *reason* is the exception, if any, that ended the connection.
        """

        failure = ConnectionClosed(reason=reason)

        with self.lock:
            if self.failure is None:
                self.failure = failure

            pending = list(self.pending.values())
            self.pending.clear()

        if pending:
            logger.info("failing %d outstanding call(s)", len(pending))

        for call in pending:
            call._fail(failure)


# end of class WaitingCallRegistry


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
