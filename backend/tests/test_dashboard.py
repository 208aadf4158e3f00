import pytest
from tests.auth_helpers import login


def test_admin_cards(client, headers):
    client.post('/sales', json={'pharmacy': 'MediCare', 'items': 2, 'total': 500}, headers=headers)
    body = client.get('/dashboard', headers=headers).get_json()
    assert body['role'] == 'admin'
    cards = body['cards']
    assert cards['total_medicines'] == 8
    assert cards['active_pharmacies'] == 3
    assert cards['low_stock_items'] == 3
    assert cards['todays_orders'] == 1
    assert cards['monthly_sales'] == 500
    assert cards['total_revenue'] == 12300
    assert cards['active_suppliers'] == 4
    assert cards['pending_orders'] == 1


def test_procurement_cards(client):
    headers = login(client, 'john.procurement@pharma.com')
    client.post('/purchases', json={'supplier': 'Global Pharma', 'items': 4, 'total': 900}, headers=headers)
    cards = client.get('/dashboard', headers=headers).get_json()['cards']
    assert cards == {'purchase_orders': 6, 'active_suppliers': 4, 'pending_approvals': 2, 'monthly_purchases': 900}


def test_sales_cards(client):
    headers = login(client, 'sarah.sales@pharma.com')
    cards = client.get('/dashboard', headers=headers).get_json()['cards']
    assert cards == {'daily_sales': 0, 'todays_orders': 0, 'active_pharmacies': 3, 'pending_payments': 3300}


def test_inventory_cards(client):
    headers = login(client, 'mike.inventory@pharma.com')
    cards = client.get('/dashboard', headers=headers).get_json()['cards']
    medicines = client.get('/inventory/medicines', headers=headers).get_json()['data']
    assert cards['total_medicines'] == 8
    assert cards['low_stock_items'] == 3
    assert cards['stock_value'] == pytest.approx(sum(m['stock'] * m['price'] for m in medicines))
    assert cards['expiring_soon'] == sum(1 for m in medicines if m['status'] == 'expiring-soon')


def test_pharmacy_cards_follow_session_email(client):
    headers = login(client, 'city@pharmacy.com')
    body = client.get('/dashboard', headers=headers).get_json()
    assert body['role'] == 'pharmacy'
    assert body['cards'] == {'my_orders': 2, 'pending_orders': 0, 'total_spent': 5300, 'available_credit': 10000}
    assert [o['id'] for o in body['recent_orders']] == ['INV-001', 'INV-005']
    assert 'categories' not in body


def test_pharmacy_without_registration(client):
    headers = login(client, 'new@pharmacy.org')
    assert client.get('/dashboard', headers=headers).get_json()['cards']['my_orders'] == 0


def test_recent_orders_are_newest_sales(client, headers):
    client.post('/sales', json={'pharmacy': 'MediCare', 'items': 2, 'total': 500}, headers=headers)
    body = client.get('/dashboard', headers=headers).get_json()
    orders = body['recent_orders']
    assert [o['id'] for o in orders] == ['INV-006', 'INV-001', 'INV-002', 'INV-003']
    assert orders[2] == {'id': 'INV-002', 'pharmacy': 'Health Plus', 'amount': 1800, 'payment': 'pending', 'date': '2025-10-28'}


def test_category_counts(client, headers):
    body = client.get('/dashboard', headers=headers).get_json()
    assert body['categories'] == [
        {'category': 'Pain Relief', 'count': 2},
        {'category': 'Antibiotics', 'count': 2},
        {'category': 'Digestive', 'count': 1},
        {'category': 'Diabetes', 'count': 1},
        {'category': 'Cardiovascular', 'count': 1},
        {'category': 'Vitamins', 'count': 1},
    ]
    assert sum(c['count'] for c in body['categories']) == body['cards']['total_medicines']


def test_dashboard_sections_follow_role(client):
    sales = client.get('/dashboard', headers=login(client, 'sarah.sales@pharma.com')).get_json()
    assert 'recent_orders' in sales and 'categories' in sales
    for email in ('john.procurement@pharma.com', 'mike.inventory@pharma.com'):
        body = client.get('/dashboard', headers=login(client, email)).get_json()
        assert 'recent_orders' not in body
        assert 'categories' not in body


def test_available_credit_subtracts_unpaid_orders(client):
    headers = _pharmacy_signup(client, 'health@plus.com')
    cards = client.get('/dashboard', headers=headers).get_json()['cards']
    # INV-002 is still pending
    assert cards['pending_orders'] == 1
    assert cards['available_credit'] == 8200


def test_available_credit_uses_configured_limit(app_instance, client):
    app_instance.config['PHARMACY_CREDIT_LIMIT'] = 1000
    headers = _pharmacy_signup(client, 'health@plus.com')
    assert client.get('/dashboard', headers=headers).get_json()['cards']['available_credit'] == 0


def _pharmacy_signup(client, email):
    resp = client.post('/auth/signup', json={
        'name': 'Health Plus', 'email': email, 'password': 'pw', 'confirm_password': 'pw', 'role': 'pharmacy',
    })
    return {'Authorization': f"Bearer {resp.get_json()['access_token']}"}
