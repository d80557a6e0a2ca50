""" Typed DevTools methods. A :class:`Method` knows two things: how to
    express itself as the 'params' of a call, and how to decode the 'result'
    of the matching response. Anything providing a *name* attribute and
    :func:`params` and :func:`decode` methods can be handed to
    :func:`cdpconn.Connection.call`; the classes here are a convenience,
    not a requirement.

    Only a handful of browser-level methods are defined; the full catalog
    is far larger, and :class:`RawMethod` covers everything else.
"""

from .. import json
from . import fields


class Result:
    """ The decoded result of a method call. Each name in *required* must
        be present in the result dictionary; the names in *optional* may be
        absent, and default to None. Attribute names match the keys on the
        wire. Any additional keys are retained as attributes as well.
    """

    required = ()
    optional = ()

    def __init__(self, **kwargs):

        for key in self.optional:
            setattr(self, key, None)

        for key,value in kwargs.items():
            setattr(self, key, value)


    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, repr(vars(self)))


    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return vars(self) == vars(other)


    @classmethod
    def from_dict(cls, result):
        """ Construct a new instance from the *result* dictionary. Raises
            TypeError if *result* is not a dictionary, or KeyError if a
            required key is missing.
        """

        if isinstance(result, dict):
            pass
        else:
            raise TypeError('result must be an object, not ' + type(result).__name__)

        for key in cls.required:
            if key in result:
                pass
            else:
                raise KeyError('result is missing required key: ' + key)

        return cls(**result)


# end of class Result



class Empty(Result):
    """ The result of methods that return nothing of interest. """



class Method:
    """ Base class for typed methods. Subclasses set *name*, list the
        *parameters* they carry (attribute names, which are also the keys
        on the wire), and set *returns* to the :class:`Result` subclass the
        response decodes into. Parameters left as None are omitted.
    """

    name = None
    parameters = ()
    returns = Empty

    def __init__(self, **kwargs):

        for key in self.parameters:
            setattr(self, key, None)

        for key,value in kwargs.items():
            if key in self.parameters:
                pass
            else:
                raise TypeError('%s has no parameter %s' % (self.name, repr(key)))
            setattr(self, key, value)


    def __repr__(self):
        return '%s(%s)' % (type(self).__name__, repr(self.params()))


    def params(self):
        params = dict()

        for key in self.parameters:
            value = getattr(self, key)
            if value is None:
                continue
            params[key] = value

        return params


    def decode(self, result):
        return self.returns.from_dict(result)


# end of class Method



class RawMethod:
    """ An untyped method: the *params* are passed through as-is, and the
        result is returned as the raw dictionary received from the browser.
    """

    def __init__(self, name, params=None):

        if params is None:
            params = dict()

        self.name = name
        self._params = params


    def __repr__(self):
        return 'RawMethod(%s, %s)' % (repr(self.name), repr(self._params))


    def params(self):
        return self._params


    def decode(self, result):
        if isinstance(result, dict):
            return result
        raise TypeError('result must be an object, not ' + type(result).__name__)


# end of class RawMethod



# Browser domain.

class Version(Result):
    required = ('protocolVersion', 'product', 'userAgent')
    optional = ('revision', 'jsVersion')


class GetVersion(Method):
    name = 'Browser.getVersion'
    returns = Version



# Target domain.

class BrowserContext(Result):
    required = ('browserContextId',)


class BrowserContexts(Result):
    required = ('browserContextIds',)


class TargetCreated(Result):
    required = ('targetId',)


class Targets(Result):
    required = ('targetInfos',)


class Attached(Result):
    required = ('sessionId',)


class Closed(Result):
    optional = ('success',)


class CreateBrowserContext(Method):
    name = 'Target.createBrowserContext'
    parameters = ('disposeOnDetach', 'proxyServer', 'proxyBypassList')
    returns = BrowserContext


class GetBrowserContexts(Method):
    name = 'Target.getBrowserContexts'
    returns = BrowserContexts


class DisposeBrowserContext(Method):
    name = 'Target.disposeBrowserContext'
    parameters = ('browserContextId',)


class CreateTarget(Method):
    name = 'Target.createTarget'
    parameters = ('url', 'width', 'height', 'browserContextId', 'newWindow', 'background')
    returns = TargetCreated


class CloseTarget(Method):
    name = 'Target.closeTarget'
    parameters = ('targetId',)
    returns = Closed


class GetTargets(Method):
    name = 'Target.getTargets'
    parameters = ('filter',)
    returns = Targets


class AttachToTarget(Method):
    name = 'Target.attachToTarget'
    parameters = ('targetId', 'flatten')
    returns = Attached


class DetachFromTarget(Method):
    name = 'Target.detachFromTarget'
    parameters = ('sessionId', 'targetId')


class SetDiscoverTargets(Method):
    name = 'Target.setDiscoverTargets'
    parameters = ('discover', 'filter')


class SendMessageToTarget(Method):
    """ Deliver a complete envelope to an attached target. The *message* may
        be given either as text or as a :class:`message.MethodCall`, which
        will be encoded here.
    """

    name = 'Target.sendMessageToTarget'
    parameters = ('message', 'sessionId', 'targetId')

    def params(self):

        params = Method.params(self)
        message = params.get(fields.MESSAGE)

        try:
            message.to_dict
        except AttributeError:
            pass
        else:
            encoded = json.dumps(message.to_dict())
            params[fields.MESSAGE] = encoded.decode()

        return params


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
