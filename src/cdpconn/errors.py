""" Exceptions raised to callers of a :class:`cdpconn.Connection`. Errors
    that concern a single call (:class:`ProtocolError`, :class:`ShapeMismatch`,
    :class:`CallTimeout`) are raised only to that caller; a
    :class:`ConnectionClosed` means the connection as a whole is gone, and
    every outstanding and future call will see the same.
"""


class CDPError(Exception):
    """ Base class for all errors raised by this package. """


class ConnectionClosed(CDPError):
    """ The connection terminated before a response could be delivered.
        The *reason* is the exception, if any, that ended the connection.
    """

    def __init__(self, message=None, reason=None):

        if message is None:
            message = 'connection closed'
            if reason is not None:
                message += ': ' + str(reason)

        CDPError.__init__(self, message)
        self.reason = reason


class ProtocolError(CDPError):
    """ The browser answered a call with an error object instead of a result.
    """

    def __init__(self, code, message, data=None):
        CDPError.__init__(self, '%s (%d)' % (message, code))
        self.code = code
        self.message = message
        self.data = data


class ShapeMismatch(CDPError):
    """ The result of a call could not be decoded into the form the method
        declares.
    """


class CallTimeout(CDPError):
    """ No response arrived within the caller's timeout. """


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
