"""
Pytest configuration and fixtures.
Ensures tests use an isolated document store, not the production one.
"""

import os
import pytest
import tempfile

# Set test store path BEFORE importing app
# This ensures all tests use an isolated store
TEST_STORE_PATH = os.path.join(tempfile.gettempdir(), 'hotelclub_test_db.json')
os.environ['STORE_PATH'] = TEST_STORE_PATH

MEMBER_PHONE = '987654321'
MEMBER_PASSWORD = 'secreto1'
OTHER_PHONE = '912345678'
OTHER_PASSWORD = 'secreto2'
ADMIN_PHONE = '999999999'
ADMIN_PASSWORD = 'admin123'


@pytest.fixture(scope='session', autouse=True)
def setup_test_environment():
    """Set up test environment before any tests run."""
    os.environ['STORE_PATH'] = TEST_STORE_PATH
    os.environ['FLASK_ENV'] = 'test'

    yield

    # Cleanup: remove the shared test store after all tests
    if os.path.exists(TEST_STORE_PATH):
        try:
            os.remove(TEST_STORE_PATH)
        except PermissionError:
            pass  # Windows may have file locked


@pytest.fixture
def app(tmp_path):
    """Create test application with its own store file."""
    from app import create_app
    from database import init_store, init_db

    app = create_app('test')
    app.config['TESTING'] = True
    app.config['WTF_CSRF_ENABLED'] = False
    app.config['STORE_PATH'] = str(tmp_path / 'db.json')
    app.config['ADMIN_PHONE'] = ADMIN_PHONE
    app.config['ADMIN_PASSWORD'] = ADMIN_PASSWORD
    init_store(app)

    with app.app_context():
        init_db()
        yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


def _make_user(phone, password, name, role='socio'):
    from models.user import User, create_user, get_user_by_id

    user_id = create_user(name=name, phone=phone, password=password, role=role)
    return User(get_user_by_id(user_id))


@pytest.fixture
def member(app):
    """Registered member."""
    return _make_user(MEMBER_PHONE, MEMBER_PASSWORD, 'Rosa Quispe')


@pytest.fixture
def other_member(app):
    """A second registered member."""
    return _make_user(OTHER_PHONE, OTHER_PASSWORD, 'Luis Huamán')


@pytest.fixture
def admin(app):
    """Administrator seeded by init_db."""
    from models.user import User, get_user_by_phone

    return User(get_user_by_phone(ADMIN_PHONE))


def login(client, phone, password, role=None):
    """Log a client in through the JSON login endpoint."""
    payload = {'phone': phone, 'password': password}
    if role:
        payload['role'] = role
    return client.post('/login', json=payload)


@pytest.fixture
def member_client(client, member):
    """Client logged in as the member."""
    response = login(client, MEMBER_PHONE, MEMBER_PASSWORD)
    assert response.status_code == 200
    return client


@pytest.fixture
def admin_client(client, admin):
    """Client logged in as the administrator."""
    response = login(client, ADMIN_PHONE, ADMIN_PASSWORD, role='admin')
    assert response.status_code == 200
    return client
