"""Tests for configuration objects and create_app wiring."""

from library_api import create_app
from library_api.config import Config, TestConfig


class TestConfigDefaults:
    def test_defaults(self) -> None:
        assert Config.SQLALCHEMY_TRACK_MODIFICATIONS is False
        assert isinstance(Config.PORT, int)
        assert Config.DOCS_URL

    def test_test_config_uses_memory_sqlite(self) -> None:
        assert TestConfig.TESTING is True
        assert TestConfig.SQLALCHEMY_DATABASE_URI == "sqlite://"


class TestCreateApp:
    def test_config_object_is_applied(self) -> None:
        class Custom(TestConfig):
            DOCS_URL = "/docs"

        app = create_app(Custom)
        assert app.config["TESTING"] is True
        assert app.test_client().get("/").get_json()["docs"] == "/docs"

    def test_book_routes_registered(self, app) -> None:
        rules = {(r.rule, tuple(sorted(r.methods - {"HEAD", "OPTIONS"}))) for r in app.url_map.iter_rules()}
        assert ("/api/books/", ("GET",)) in rules
        assert ("/api/books/", ("POST",)) in rules
        assert ("/api/books/<id>", ("GET",)) in rules
        assert ("/api/books/<id>/borrow", ("PUT",)) in rules
        assert ("/api/books/<id>/return", ("PUT",)) in rules
