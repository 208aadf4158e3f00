def login(client, email='admin@pharma.com', password='pw'):
    """Sign in through the mock login and return bearer headers."""
    resp = client.post('/auth/login', json={'email': email, 'password': password})
    assert resp.status_code == 200
    return {'Authorization': f"Bearer {resp.get_json()['access_token']}"}
