from pharmasys import create_app
from pharmasys.services.session import role_for_email, new_session_id, SESSION_KEY
from tests.auth_helpers import login
from tests.conftest import TEST_CONFIG


def test_login_derives_role_and_name(client):
    resp = client.post('/auth/login', json={'email': 'jane.procurement@pharma.com', 'password': 'x'})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body['access_token']
    user = body['user']
    assert user['role'] == 'procurement'
    assert user['name'] == 'jane.procurement'
    assert len(user['id']) == 9


def test_role_for_email_precedence():
    assert role_for_email('sales.inventory@pharma.com') == 'sales'
    assert role_for_email('procurement-sales@pharma.com') == 'procurement'
    assert role_for_email('stock.inventory@pharma.com') == 'inventory'
    assert role_for_email('pharmacy@city.com') == 'pharmacy'
    assert role_for_email('owner@pharma.com') == 'admin'


def test_session_ids_are_base36():
    sid = new_session_id()
    assert len(sid) == 9
    assert all(c.isdigit() or 'a' <= c <= 'z' for c in sid)


def test_login_requires_credentials(client):
    resp = client.post('/auth/login', json={'email': 'a@b.com'})
    assert resp.status_code == 400
    assert resp.get_json()['error']['detail'] == 'password required'


def test_me_requires_token(client):
    resp = client.get('/auth/me')
    assert resp.status_code == 401
    body = resp.get_json()
    assert body['error']['status'] == 401
    assert body['error']['detail'] == 'Login required'


def test_me_returns_session_user(client):
    headers = login(client, 'sarah.sales@pharma.com')
    resp = client.get('/auth/me', headers=headers)
    assert resp.status_code == 200
    assert resp.get_json()['role'] == 'sales'


def test_signup_password_mismatch(client):
    resp = client.post('/auth/signup', json={
        'name': 'New', 'email': 'new@pharma.com', 'password': 'a', 'confirm_password': 'b', 'role': 'sales',
    })
    assert resp.status_code == 400
    assert resp.get_json()['error']['detail'] == 'Passwords do not match'


def test_signup_uses_submitted_role(client):
    resp = client.post('/auth/signup', json={
        'name': 'Nina', 'email': 'nina@pharma.com', 'password': 'a', 'confirm_password': 'a', 'role': 'inventory',
    })
    assert resp.status_code == 201
    user = resp.get_json()['user']
    assert user['name'] == 'Nina'
    assert user['role'] == 'inventory'


def test_signup_rejects_unknown_role(client):
    resp = client.post('/auth/signup', json={
        'name': 'X', 'email': 'x@pharma.com', 'password': 'a', 'confirm_password': 'a', 'role': 'root',
    })
    assert resp.status_code == 400
    assert resp.get_json()['error']['detail'] == 'role invalid'


def test_logout_clears_session_and_invalidates_token(client, app_instance):
    headers = login(client)
    assert client.post('/auth/logout', headers=headers).status_code == 200
    assert app_instance.extensions['pharmasys.session'].user is None
    resp = client.get('/auth/me', headers=headers)
    assert resp.status_code == 401
    assert resp.get_json()['error']['detail'] == 'Session expired'


def test_new_login_replaces_previous_session(client):
    first = login(client, 'admin@pharma.com')
    second = login(client, 'sarah.sales@pharma.com')
    assert client.get('/auth/me', headers=first).status_code == 401
    assert client.get('/auth/me', headers=second).get_json()['role'] == 'sales'


def test_session_survives_restart(tmp_path):
    config = {**TEST_CONFIG, 'DATABASE_URL': f"sqlite:///{tmp_path / 'session.db'}"}
    app = create_app(dict(config))
    client = app.test_client()
    headers = login(client, 'mike.inventory@pharma.com')
    user = client.get('/auth/me', headers=headers).get_json()

    restarted = create_app(dict(config))
    ctx = restarted.extensions['pharmasys.session']
    assert ctx.is_authenticated
    assert ctx.user.to_dict() == user
    # the old token still belongs to the restored session
    resp = restarted.test_client().get('/auth/me', headers=headers)
    assert resp.status_code == 200

    restarted.test_client().post('/auth/logout', headers=headers)
    assert create_app(dict(config)).extensions['pharmasys.session'].user is None


def test_session_record_key(client, app_instance):
    login(client)
    with app_instance.app_context():
        from pharmasys import get_db
        from pharmasys.models.session_store import KeyValue
        row = get_db().get(KeyValue, SESSION_KEY)
        assert row is not None
        assert row.value['email'] == 'admin@pharma.com'


def test_forgot_password(client):
    resp = client.post('/auth/forgot-password', json={'email': 'a@b.com'})
    assert resp.status_code == 200
    assert resp.get_json() == {'sent': True}


def test_signup_defaults_to_pharmacy_role(client):
    resp = client.post('/auth/signup', json={
        'name': 'Corner Drugs', 'email': 'corner@drugs.com', 'password': 'a', 'confirm_password': 'a',
    })
    assert resp.status_code == 201
    assert resp.get_json()['user']['role'] == 'pharmacy'
