def test_list_purchases_newest_first(client, headers):
    body = client.get('/purchases', headers=headers).get_json()
    assert [p['id'] for p in body['data']][:2] == ['PO-001', 'PO-002']
    assert body['stats'] == {'total': 5, 'pending': 1, 'approved': 2, 'total_value': 55500}


def test_create_purchase_is_pending_and_prepended(client, headers):
    resp = client.post('/purchases', json={'supplier': 'Global Pharma', 'items': 4, 'total': 900}, headers=headers)
    assert resp.status_code == 201
    po = resp.get_json()
    assert po['id'] == 'PO-006'
    assert po['status'] == 'pending'
    assert po['created_by'] == 'admin'
    ids = [p['id'] for p in client.get('/purchases', headers=headers).get_json()['data']]
    assert ids[0] == 'PO-006'


def test_approve_and_invalid_transitions(client, headers):
    resp = client.post('/purchases/PO-001/approve', headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()['status'] == 'approved'
    # already decided
    resp = client.post('/purchases/PO-001/approve', headers=headers)
    assert resp.status_code == 400
    assert resp.get_json()['error']['detail'] == 'Invalid status transition approved -> approved'
    assert client.post('/purchases/PO-001/reject', headers=headers).status_code == 400
    entry = client.get('/audit-logs', headers=headers).get_json()['data'][0]
    assert entry['type'] == 'approve'
    assert entry['details'] == 'PO-001 approved'


def test_reject_pending_order(client, headers):
    po = client.post('/purchases', json={'supplier': 'MedTech Solutions', 'items': 1, 'total': 10}, headers=headers).get_json()
    resp = client.post(f"/purchases/{po['id']}/reject", headers=headers)
    assert resp.get_json()['status'] == 'rejected'
    assert client.post('/purchases/PO-404/reject', headers=headers).status_code == 404


def test_status_filter(client, headers):
    body = client.get('/purchases?status=approved', headers=headers).get_json()
    assert [p['id'] for p in body['data']] == ['PO-002', 'PO-004']
    assert client.get('/purchases?status=shipped', headers=headers).status_code == 400
