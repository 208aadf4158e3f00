NEW_PHARMACY = {'name': 'Corner Drugs', 'owner': 'Ann Lee', 'contact': '+1-555-0199', 'email': 'corner@drugs.com', 'address': '9 Side St'}


def test_list_pharmacies(client, headers):
    body = client.get('/pharmacies', headers=headers).get_json()
    assert body['stats'] == {'total': 4, 'active': 3, 'total_orders': 156, 'total_spent': 415000}
    resp = client.get('/pharmacies?search=sarah', headers=headers).get_json()
    assert [p['id'] for p in resp['data']] == ['PHR-002']


def test_create_and_update_pharmacy(client, headers):
    resp = client.post('/pharmacies', json=NEW_PHARMACY, headers=headers)
    assert resp.status_code == 201
    p = resp.get_json()
    assert p['id'] == 'PHR-005'
    assert p['active'] is True
    assert p['total_orders'] == 0
    resp = client.put('/pharmacies/PHR-005', json={'owner': 'Bob Lee'}, headers=headers)
    assert resp.get_json()['owner'] == 'Bob Lee'
    assert client.post('/pharmacies', json={'name': 'X'}, headers=headers).status_code == 400


def test_toggle_pharmacy(client, headers):
    resp = client.post('/pharmacies/PHR-004/toggle', headers=headers)
    assert resp.get_json()['active'] is True
    assert client.get('/pharmacies', headers=headers).get_json()['stats']['active'] == 4
    entry = client.get('/audit-logs', headers=headers).get_json()['data'][0]
    assert entry['details'] == 'Wellness Pharmacy marked as active'
    assert client.post('/pharmacies/PHR-404/toggle', headers=headers).status_code == 404
