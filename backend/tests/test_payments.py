def test_list_payments(client, headers):
    body = client.get('/payments', headers=headers).get_json()
    assert body['stats'] == {'total': 5, 'completed_amount': 6450, 'pending_amount': 4600, 'completed': 3}
    resp = client.get('/payments?status=pending', headers=headers).get_json()
    assert [p['id'] for p in resp['data']] == ['PAY-002', 'PAY-005']


def test_create_payment(client, headers):
    resp = client.post('/payments', json={'invoice_id': 'INV-002', 'pharmacy': 'Health Plus', 'amount': 1800}, headers=headers)
    assert resp.status_code == 201
    p = resp.get_json()
    assert p['id'] == 'PAY-006'
    assert p['status'] == 'completed'
    assert p['method'] == 'bank-transfer'
    stats = client.get('/payments', headers=headers).get_json()['stats']
    assert stats['completed_amount'] == 8250


def test_create_payment_validation(client, headers):
    resp = client.post('/payments', json={'invoice_id': 'INV-002', 'pharmacy': 'Health Plus', 'amount': 5, 'method': 'bitcoin'}, headers=headers)
    assert resp.status_code == 400
    resp = client.post('/payments', json={'invoice_id': 'INV-002', 'pharmacy': 'Health Plus', 'amount': -5}, headers=headers)
    assert resp.status_code == 400
    assert resp.get_json()['error']['detail'] == 'amount invalid'
