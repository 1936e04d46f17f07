import pytest

from library_api import create_app
from library_api.config import TestConfig
from library_api.extensions import db


@pytest.fixture
def app():
    # fresh in-memory database for every test
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def ctx(app):
    with app.app_context():
        yield


@pytest.fixture
def book_payload():
    return {
        "title": "The Pragmatic Programmer",
        "author": "Andrew Hunt",
        "isbn": "978-0201616224",
        "publisher": "Addison-Wesley",
        "publishedYear": 1999,
        "genre": "Software",
    }


@pytest.fixture
def create_book(client, book_payload):
    def _create(**overrides):
        payload = {**book_payload, **overrides}
        r = client.post("/api/books", json=payload)
        assert r.status_code == 201, r.get_json()
        return r.get_json()["data"]
    return _create
