""" A class representation of the DevTools envelopes: the outgoing
    :class:`MethodCall`, and the three shapes an incoming frame can take,
    a :class:`Response`, an :class:`Event`, or a :class:`TargetMessage`.
"""

from . import fields


class MethodCall:
    """ A method invocation on its way to the browser. The *id* is assigned
        by the connection; the *method* is the fully qualified method name,
        such as 'Target.getTargets'; the *params* are whatever JSON-ready
        value the method supplied, typically a dictionary.
    """

    def __init__(self, id, method, params=None):

        if params is None:
            params = dict()

        self.id = id
        self.method = method
        self.params = params


    def __repr__(self):
        return 'MethodCall(%d, %s, %s)' % (self.id, repr(self.method), repr(self.params))


    def to_dict(self):
        envelope = dict()
        envelope[fields.ID] = self.id
        envelope[fields.METHOD] = self.method
        envelope[fields.PARAMS] = self.params
        return envelope


# end of class MethodCall



class Envelope:
    """ Common behavior for incoming envelopes. Envelopes that arrived
        nested inside a Target.receivedMessageFromTarget event remember the
        *session_id* and *target_id* of the target they came from; neither
        attribute is considered when comparing envelopes for equality.
    """

    compared = ()

    session_id = None
    target_id = None

    def __eq__(self, other):

        if type(self) is not type(other):
            return NotImplemented

        for attribute in self.compared:
            if getattr(self, attribute) != getattr(other, attribute):
                return False

        return True


    def __repr__(self):
        values = list()
        for attribute in self.compared:
            values.append('%s=%s' % (attribute, repr(getattr(self, attribute))))

        return '%s(%s)' % (type(self).__name__, ', '.join(values))


# end of class Envelope



class Response(Envelope):
    """ The browser's reply to a :class:`MethodCall` with the same *id*.
        Exactly one of *result* or *error* is meaningful; the *error*, if
        present, is a dictionary with 'code' and 'message' keys.
    """

    compared = ('id', 'result', 'error')

    def __init__(self, id, result=None, error=None):

        self.id = id
        self.result = result
        self.error = error


    @property
    def failed(self):
        return self.error is not None


# end of class Response



class Event(Envelope):
    """ A notification initiated by the browser. The *method* is the event
        name, for example 'Target.targetCreated'.
    """

    compared = ('method', 'params')

    def __init__(self, method, params=None):

        if params is None:
            params = dict()

        self.method = method
        self.params = params


# end of class Event



class TargetMessage(Event):
    """ A Target.receivedMessageFromTarget event. The *message* is the raw
        text of a complete envelope sent by an attached target; it must be
        decoded in turn before anyone can make sense of it.
    """

    def __init__(self, params):

        Event.__init__(self, fields.RECEIVED_MESSAGE_FROM_TARGET, params)

        self.message = params[fields.MESSAGE]
        self.session_id = params.get(fields.SESSION_ID)
        self.target_id = params.get(fields.TARGET_ID)


# end of class TargetMessage


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
