""" Process configuration for a DevTools connection: where the browser is
    listening, and how long to wait for it. Every setting can be passed
    explicitly, or overridden via an environment variable; otherwise a
    default applies. Environment variables are consulted once, the first
    time a setting is requested, and cached thereafter.
"""

import os


default_host = '127.0.0.1'
default_port = 9222
default_connect_timeout = 10.0
default_poll_interval = 0.5

_cache = dict()


def _lookup(variable, default, convert):
    """ Return the cached value for the environment *variable*, reading and
        converting it via *convert* if this is the first request. The
        *default* applies if the variable is not set.
    """

    try:
        return _cache[variable]
    except KeyError:
        pass

    try:
        raw = os.environ[variable]
    except KeyError:
        found = default
    else:
        try:
            found = convert(raw)
        except ValueError:
            raise ValueError('invalid value for %s: %s' % (variable, repr(raw)))

    _cache[variable] = found
    return found


def clear():
    """ Forget any cached settings; the next request for each setting will
        consult the environment again.
    """

    _cache.clear()


def debug_host(default=None):
    """ Return the hostname or address of the browser debug endpoint. This
        is ``127.0.0.1`` unless the ``CDPCONN_HOST`` environment variable is
        set, or an explicit *default* is provided.
    """

    if default is not None:
        return str(default)

    return _lookup('CDPCONN_HOST', default_host, str)


def debug_port(default=None):
    """ Return the browser's remote debugging port, as an integer. The
        ``CDPCONN_PORT`` environment variable overrides the usual 9222.
    """

    if default is None:
        found = _lookup('CDPCONN_PORT', default_port, int)
    else:
        found = int(default)

    if found < 1 or found > 65535:
        raise ValueError('debug port out of range: ' + str(found))

    return found


def connect_timeout(default=None):
    """ Return the number of seconds allowed for the WebSocket handshake.
    """

    if default is not None:
        return float(default)

    return _lookup('CDPCONN_CONNECT_TIMEOUT', default_connect_timeout, float)


def poll_interval(default=None):
    """ Return the number of seconds a receive may block before the
        transport checks whether it is shutting down.
    """

    if default is not None:
        return float(default)

    return _lookup('CDPCONN_POLL_INTERVAL', default_poll_interval, float)


def url(browser_id, host=None, port=None):
    """ Return the WebSocket URL for the browser-level DevTools endpoint
        of the browser identified by *browser_id*.
    """

    if browser_id is None or browser_id == '':
        raise ValueError('the browser id must be specified')

    host = debug_host(host)
    port = debug_port(port)

    return 'ws://%s:%d/devtools/browser/%s' % (host, port, browser_id)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
