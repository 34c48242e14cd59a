import json
from unittest import mock

import pytest
import requests

from xhrmock import TransportRegistry, UnknownTransportError, registry, transport
from xhrmock.cli import main, resolve_transport


@pytest.fixture()
def manifest(tmp_path):
    path = tmp_path / 'stub.json'
    path.write_text(json.dumps({
        'body': 'bar',
        'content_type': 'text/plain',
        'status': 404,
        'headers': {'X-Stub': 'yes'},
    }))
    return str(path)


def test_reason(capsys):
    assert main(['reason', '404']) == 0
    assert capsys.readouterr().out == 'Not Found\n'


def test_reason_unknown(capsys):
    assert main(['reason', '299']) == 0
    assert capsys.readouterr().out == '\n'


def test_validate(manifest, tmp_path, capsys):
    bad = tmp_path / 'bad.json'
    bad.write_text(json.dumps({'status': 200}))
    assert main(['validate', manifest]) == 0
    assert main(['validate', manifest, str(bad)]) == 1
    out = capsys.readouterr().out
    assert 'OK' in out
    assert 'FAIL' in out


def test_request_through_mock(manifest, capsys):
    assert main(['request', 'GET', 'http://example.com', '--manifest', manifest,
                 '--header', 'Accept: text/plain']) == 0
    out = capsys.readouterr().out
    assert out.startswith('404 Not Found\n')
    assert 'x-stub: yes\n' in out
    assert 'content-length: 3\n' in out
    assert out.endswith('\nbar\n')
    assert transport.XMLHttpRequest is registry.original


def test_request_rejects_bad_header(capsys):
    assert main(['request', 'GET', 'http://example.com', '--header', 'nocolon']) == 2


def test_request_with_bad_manifest(tmp_path):
    path = tmp_path / 'bad.json'
    path.write_text('[]')
    assert main(['request', 'GET', 'http://example.com', '--manifest', str(path)]) == 1


def test_unknown_transport_rejected_by_parser():
    with pytest.raises(SystemExit):
        main(['request', 'GET', 'http://example.com', '--transport', 'carrier-pigeon'])


def test_resolve_transport():
    registry = TransportRegistry(transport)
    assert resolve_transport('mock', registry) is registry.mock_class
    assert resolve_transport('requests', registry) is transport.XMLHttpRequest
    with pytest.raises(UnknownTransportError):
        resolve_transport('carrier-pigeon', registry)


def test_request_through_requests(capsys):
    with mock.patch('requests.request', side_effect=requests.ConnectionError('down')):
        assert main(['request', 'GET', 'http://example.com', '--transport', 'requests']) == 1
