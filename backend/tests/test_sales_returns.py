def test_list_returns(client, headers):
    body = client.get('/sales-returns', headers=headers).get_json()
    assert body['stats'] == {'total': 3, 'approved': 2, 'pending': 1, 'total_amount': 1250}
    resp = client.get('/sales-returns?search=inv-005', headers=headers).get_json()
    assert [r['id'] for r in resp['data']] == ['RET-003']
    resp = client.get('/sales-returns?status=pending', headers=headers).get_json()
    assert [r['id'] for r in resp['data']] == ['RET-002']


def test_create_return(client, headers):
    payload = {'invoice_id': 'INV-001', 'pharmacy': 'City Pharmacy', 'items': 1, 'amount': 90, 'reason': 'Wrong item'}
    resp = client.post('/sales-returns', json=payload, headers=headers)
    assert resp.status_code == 201
    r = resp.get_json()
    assert r['id'] == 'RET-004'
    assert r['status'] == 'pending'
    assert client.get('/sales-returns/RET-004', headers=headers).status_code == 200
    resp = client.post('/sales-returns', json={**payload, 'reason': 'Changed mind'}, headers=headers)
    assert resp.status_code == 400
    assert resp.get_json()['error']['detail'] == 'reason invalid'
