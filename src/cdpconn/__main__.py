""" Issue a single DevTools call from the command line, and print the result
    as JSON. For example::

        python -m cdpconn 0c7a1f2e-... Target.getTargets
        python -m cdpconn --port 9223 0c7a1f2e-... Target.createTarget '{"url": "about:blank"}'
"""

import argparse
import logging
import sys

from . import connection
from . import json
from .errors import CDPError
from .transport.channel import Channel


def parse_arguments(arguments=None):

    parser = argparse.ArgumentParser(prog='cdpconn', description=__doc__,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)

    parser.add_argument('browser_id', help='browser id, as reported by /json/version')
    parser.add_argument('method', help='fully qualified method name, such as Target.getTargets')
    parser.add_argument('params', nargs='?', default='{}', help='method parameters as a JSON object')

    parser.add_argument('--host', default=None, help='debug host (default: $CDPCONN_HOST or 127.0.0.1)')
    parser.add_argument('--port', default=None, type=int, help='debug port (default: $CDPCONN_PORT or 9222)')
    parser.add_argument('--timeout', default=None, type=float, help='seconds to wait for the response')
    parser.add_argument('--events', action='store_true', help='also print browser events received')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='more logging; repeat for debug output')

    parsed = parser.parse_args(arguments)

    try:
        parsed.params = json.loads(parsed.params)
    except json.DecodeError:
        parser.error('params must be valid JSON: ' + parsed.params)

    if isinstance(parsed.params, dict):
        pass
    else:
        parser.error('params must be a JSON object')

    return parsed


def main(arguments=None):

    parsed = parse_arguments(arguments)

    level = logging.WARNING
    if parsed.verbose == 1:
        level = logging.INFO
    elif parsed.verbose > 1:
        level = logging.DEBUG

    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    events = None
    if parsed.events:
        events = Channel()

    try:
        with connection.connect(parsed.browser_id, parsed.host, parsed.port, browser_events=events) as browser:
            result = browser.send_command(parsed.method, parsed.params, parsed.timeout)
    except CDPError as e:
        sys.stderr.write('%s: %s\n' % (type(e).__name__, e))
        return 1

    if events is not None:
        for event in events:
            sys.stdout.write('%s %s\n' % (event.method, json.dumps(event.params).decode()))

    sys.stdout.write(json.dumps(result).decode() + '\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
