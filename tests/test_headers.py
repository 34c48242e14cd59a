from xhrmock.headers import HeaderStore


def test_lookup_ignores_case():
    headers = HeaderStore()
    headers['Accept'] = 'foo'
    assert headers['accept'] == 'foo'
    assert headers.get('ACCEPT') == 'foo'
    assert 'aCcEpT' in headers


def test_last_write_wins():
    headers = HeaderStore()
    headers['X-Token'] = 'one'
    headers['x-token'] = 'two'
    assert len(headers) == 1
    assert headers['X-TOKEN'] == 'two'


def test_iteration_keeps_insertion_order():
    headers = HeaderStore()
    headers['B'] = '1'
    headers['A'] = '2'
    headers['C'] = '3'
    assert list(headers) == ['B', 'A', 'C']


def test_normalized_and_serialize():
    headers = HeaderStore({'Content-Type': 'text/plain', 'Content-Length': 3})
    assert headers.normalized() == {'content-type': 'text/plain', 'content-length': 3}
    assert headers.serialize() == 'content-type: text/plain\r\ncontent-length: 3\r\n'


def test_missing_header():
    assert HeaderStore().get('accept') is None
