import os, sys, pytest
# Ensure the backend directory is on path so 'pharmasys' can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from pharmasys import create_app
from tests.auth_helpers import login

TEST_CONFIG = {
    'DATABASE_URL': 'sqlite+pysqlite:///:memory:',
    'JWT_SECRET_KEY': 'test-secret-key-that-is-long-enough-for-hs256',
    'AUTH_DELAY_SECONDS': 0,
    'TESTING': True,
}


@pytest.fixture()
def app_instance():
    # Fresh stores and session store per test
    app = create_app(dict(TEST_CONFIG))
    yield app


@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()


@pytest.fixture()
def headers(client):
    return login(client)
