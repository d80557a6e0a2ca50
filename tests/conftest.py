import pytest

import cdpconn
from unittransport import ScriptedTransport


@pytest.fixture
def transport():
    return ScriptedTransport()


@pytest.fixture
def events():
    return cdpconn.Channel()


@pytest.fixture
def connection(transport, events):

    connection = cdpconn.Connection(transport, browser_events=events)

    yield connection

    connection.close()


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):

    for variable in ('CDPCONN_HOST', 'CDPCONN_PORT', 'CDPCONN_CONNECT_TIMEOUT', 'CDPCONN_POLL_INTERVAL'):
        monkeypatch.delenv(variable, raising=False)

    cdpconn.config.clear()
    yield
    cdpconn.config.clear()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
