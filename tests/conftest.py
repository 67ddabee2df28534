import pytest

from tir_backend.main import create_app
from tir_backend.models import db

STRONG_PASSWORD = "Str0ng!Pass"


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "THEMATICS_ADDRESS": "localhost:1",
        "THEMATICS_TIMEOUT": 0.1,
    })

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def service(app):
    return app.extensions["account_service"]


@pytest.fixture()
def store(service):
    return service.store


@pytest.fixture()
def register(client):
    """Register through the HTTP API and return the response JSON"""
    def _register(email="a@b.com", password=STRONG_PASSWORD):
        resp = client.post("/users", json={"email": email, "password": password})
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()
    return _register
