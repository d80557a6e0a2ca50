import json
import pytest

import cdpconn
from cdpconn import __main__ as command
from unittransport import Responder, ScriptedTransport


@pytest.fixture
def scripted(monkeypatch):
    """ Route connect() to a scripted transport that answers every call.
    """

    transport = ScriptedTransport()
    responder = Responder(transport, lambda call: {'method': call['method'], 'params': call['params']})

    def connect(browser_id, host=None, port=None, target_messages=None, browser_events=None):
        transport.feed({'method': 'Target.targetCreated', 'params': {'targetInfo': {'targetId': 'T'}}})
        return cdpconn.Connection(transport, target_messages, browser_events)

    monkeypatch.setattr(cdpconn.connection, 'connect', connect)

    yield transport

    responder.stop()


def test_call(scripted, capsys):

    status = command.main(['B', 'Target.createTarget', '{"url": "about:blank"}'])
    assert status == 0

    output = capsys.readouterr().out.strip().splitlines()
    assert json.loads(output[-1]) == {'method': 'Target.createTarget', 'params': {'url': 'about:blank'}}


def test_events(scripted, capsys):

    status = command.main(['--events', 'B', 'Target.getTargets'])
    assert status == 0

    output = capsys.readouterr().out.strip().splitlines()
    assert output[0].startswith('Target.targetCreated ')
    assert json.loads(output[-1]) == {'method': 'Target.getTargets', 'params': {}}


def test_connect_failure(monkeypatch, capsys):

    def connect(*args, **kwargs):
        raise cdpconn.transport.TransportConnectError('ws://127.0.0.1:9222/devtools/browser/B: refused')

    monkeypatch.setattr(cdpconn.connection, 'connect', connect)

    assert command.main(['B', 'Target.getTargets']) == 1
    assert 'TransportConnectError' in capsys.readouterr().err


def test_bad_params():

    with pytest.raises(SystemExit):
        command.parse_arguments(['B', 'Target.getTargets', '{not json'])

    with pytest.raises(SystemExit):
        command.parse_arguments(['B', 'Target.getTargets', '[1, 2]'])


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
