""" An in-memory stand-in for a browser at the far end of a WebSocket. The
    tests feed it inbound frames, and inspect what was sent.
"""

import json
import queue
import threading

from cdpconn.transport.base import BINARY, TEXT, Frame, Transport
from cdpconn.transport.base import TransportReceiveError, TransportTimeout


_HANGUP = object()


class ScriptedTransport(Transport):

    poll_interval = 0.05

    def __init__(self):
        self.closing = False
        self.released = False
        self.inbound = queue.Queue()
        self.sent = queue.Queue()
        self.send_error = None
        self.send_lock = threading.Lock()
        self.concurrent_sends = 0


    def open(self):
        pass


    def close(self):
        # A well-behaved browser answers our close frame with its own.
        self.closing = True
        self.hangup()


    def release(self):
        self.released = True


    def send(self, text):

        if self.send_error is not None:
            raise self.send_error

        # Frames from concurrent callers must never be written at once.
        if self.send_lock.acquire(blocking=False) == False:
            self.concurrent_sends += 1
            self.send_lock.acquire()

        try:
            self.sent.put(text)
        finally:
            self.send_lock.release()


    def recv(self):

        try:
            item = self.inbound.get(timeout=self.poll_interval)
        except queue.Empty:
            raise TransportTimeout('no data')

        if item is _HANGUP:
            return None
        if isinstance(item, Exception):
            raise item
        return item


    @property
    def is_open(self):
        return not self.closing


    # Test-side controls.

    def feed(self, message):
        """ Queue one inbound text frame; *message* may be a dictionary, which
            is encoded as JSON, or raw text.
        """

        if isinstance(message, str):
            text = message
        else:
            text = json.dumps(message)

        self.inbound.put(Frame(TEXT, text))


    def feed_binary(self, data):
        self.inbound.put(Frame(BINARY, data))


    def fail(self, reason='connection reset'):
        self.inbound.put(TransportReceiveError(reason))


    def hangup(self):
        self.inbound.put(_HANGUP)


    def next_sent(self, timeout=2):
        """ Return the next frame sent to the browser, decoded from JSON.
        """

        return json.loads(self.sent.get(timeout=timeout))


# end of class ScriptedTransport



class Responder:
    """ Answer every call sent over *transport* from a background thread.
        The *reply* function receives the decoded call and returns the
        'result' dictionary for it. Calls are collected in batches of
        *batch* and answered in reverse order, so that responses arrive
        out of order with respect to the calls.
    """

    def __init__(self, transport, reply, batch=1):

        self.transport = transport
        self.reply = reply
        self.batch = batch
        self.seen = list()
        self.shutdown = False

        self.thread = threading.Thread(target=self.run)
        self.thread.daemon = True
        self.thread.start()


    def run(self):

        waiting = list()

        while self.shutdown == False:
            try:
                call = self.transport.next_sent(timeout=0.05)
            except queue.Empty:
                call = None
            else:
                self.seen.append(call)
                waiting.append(call)

            if len(waiting) >= self.batch or (call is None and waiting):
                for call in reversed(waiting):
                    result = self.reply(call)
                    self.transport.feed({'id': call['id'], 'result': result})
                waiting = list()


    def stop(self):
        self.shutdown = True
        self.thread.join(2)


# end of class Responder


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
