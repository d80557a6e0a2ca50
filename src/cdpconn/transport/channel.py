""" A one-way channel for envelopes leaving the receive thread. Unlike a
    plain :class:`queue.Queue`, a :class:`Channel` can be closed: consumers
    blocked on :func:`Channel.get` wake up and see :class:`ChannelClosed`
    once everything already queued has been drained.
"""

import collections
import logging
import queue
import threading
import time


logger = logging.getLogger(__name__)


class ChannelClosed(Exception):
    """ The channel is closed and nothing remains to be received. """



class Channel:
    """ A FIFO channel. If *maxsize* is greater than zero, :func:`put` blocks
        while the channel is full; otherwise the channel is unbounded.
    """

    def __init__(self, maxsize=0):

        self.maxsize = int(maxsize)
        self._items = collections.deque()
        self._closed = False
        self._lock = threading.Lock()
        self._readable = threading.Condition(self._lock)
        self._writable = threading.Condition(self._lock)


    def __iter__(self):
        while True:
            try:
                yield self.get()
            except ChannelClosed:
                return


    def __len__(self):
        with self._lock:
            return len(self._items)


    @property
    def closed(self):
        return self._closed


    def close(self):
        """ Close the channel. Items already queued can still be received;
            anything put afterwards is dropped.
        """

        with self._lock:
            self._closed = True
            self._readable.notify_all()
            self._writable.notify_all()


    def put(self, item):
        """ Append *item* to the channel. Returns True if the item was queued,
            False if the channel was closed and the item dropped.
        """

        with self._lock:
            while self.maxsize > 0 and len(self._items) >= self.maxsize:
                if self._closed:
                    break
                self._writable.wait()

            if self._closed:
                logger.debug("channel closed, dropping %r", item)
                return False

            self._items.append(item)
            self._readable.notify()
            return True


    def get(self, timeout=None):
        """ Remove and return the next item, blocking until one is available.
            Raises :class:`queue.Empty` if *timeout* seconds elapse first, or
            :class:`ChannelClosed` if the channel is closed and empty.
        """

        if timeout is not None:
            deadline = time.monotonic() + timeout

        with self._lock:
            while len(self._items) == 0:
                if self._closed:
                    raise ChannelClosed()

                if timeout is None:
                    self._readable.wait()
                else:
                    remaining = deadline - time.monotonic()
                    if remaining <= 0:
                        raise queue.Empty()
                    self._readable.wait(remaining)

            item = self._items.popleft()
            self._writable.notify()
            return item


# end of class Channel


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
