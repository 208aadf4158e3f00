def test_pagination_meta(client, headers):
    body = client.get('/inventory/medicines?limit=2&offset=1', headers=headers).get_json()
    assert [m['id'] for m in body['data']] == ['MED-002', 'MED-003']
    assert body['pagination'] == {'total': 8, 'limit': 2, 'offset': 1, 'returned': 2}


def test_pagination_is_clamped(client, headers):
    body = client.get('/inventory/medicines?limit=1000&offset=-3', headers=headers).get_json()
    assert body['pagination']['limit'] == 200
    assert body['pagination']['offset'] == 0
    assert body['pagination']['returned'] == 8


def test_invalid_pagination(client, headers):
    resp = client.get('/suppliers?limit=ten', headers=headers)
    assert resp.status_code == 400
    assert resp.get_json()['error']['detail'] == 'limit/offset must be int'


def test_etag_conditional(client, headers):
    first = client.get('/suppliers?limit=5', headers=headers)
    etag = first.headers.get('ETag')
    assert etag
    second = client.get('/suppliers?limit=5', headers={**headers, 'If-None-Match': etag})
    assert second.status_code == 304
    assert second.headers.get('ETag') == etag
    # any change to the list yields a new tag
    client.put('/suppliers/SUP-001', json={'contact': '+1-999'}, headers=headers)
    third = client.get('/suppliers?limit=5', headers={**headers, 'If-None-Match': etag})
    assert third.status_code == 200
