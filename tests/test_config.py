import pytest

from cdpconn import config


def test_defaults():

    assert config.debug_host() == '127.0.0.1'
    assert config.debug_port() == 9222
    assert config.connect_timeout() == 10
    assert config.poll_interval() == 0.5


def test_url():

    url = config.url('0c7a1f2e-5d4b')
    assert url == 'ws://127.0.0.1:9222/devtools/browser/0c7a1f2e-5d4b'

    url = config.url('B', host='localhost', port='9223')
    assert url == 'ws://localhost:9223/devtools/browser/B'


def test_url_requires_browser():

    with pytest.raises(ValueError):
        config.url('')

    with pytest.raises(ValueError):
        config.url(None)


def test_environment(monkeypatch):

    monkeypatch.setenv('CDPCONN_HOST', '10.0.0.5')
    monkeypatch.setenv('CDPCONN_PORT', '9223')
    monkeypatch.setenv('CDPCONN_POLL_INTERVAL', '0.1')

    assert config.url('B') == 'ws://10.0.0.5:9223/devtools/browser/B'
    assert config.poll_interval() == 0.1

    # Explicit arguments still win.
    assert config.debug_port(9333) == 9333


def test_environment_cached(monkeypatch):

    assert config.debug_port() == 9222

    monkeypatch.setenv('CDPCONN_PORT', '9223')
    assert config.debug_port() == 9222

    config.clear()
    assert config.debug_port() == 9223


def test_bad_port(monkeypatch):

    with pytest.raises(ValueError):
        config.debug_port(70000)

    monkeypatch.setenv('CDPCONN_PORT', 'ninety')
    with pytest.raises(ValueError):
        config.debug_port()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
