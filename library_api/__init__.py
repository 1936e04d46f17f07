import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from library_api.config import Config
from library_api.extensions import db, migrate, cors
from library_api.db_schema import ensure_schema


def create_app(config=Config):
    app = Flask(__name__)
    app.config.from_object(config)
    app.json.sort_keys = False
    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    # 1) db init first (db.engine / db.session)
    db.init_app(app)

    # 2) tables
    ensure_schema(app)

    # 3) other extensions
    migrate.init_app(app, db)
    cors.init_app(app, resources={r"/*": {"origins": "*"}})

    # 4) API blueprints (url_prefix lives on the blueprint)
    from library_api.controllers.book_controller import book_bp
    app.register_blueprint(book_bp)

    @app.get("/")
    def index():
        return jsonify({
            "message": "Welcome to the Library Management API",
            "docs": app.config.get("DOCS_URL", "/api-docs"),
        })

    @app.get("/health")
    def health():
        return jsonify({"success": True, "status": "ok"})

    _register_error_handlers(app)

    return app


def _register_error_handlers(app):
    # a known path with the wrong method is just an unmatched route
    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(e):
        return jsonify({"success": False, "error": "Not Found"}), 404

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({"success": False, "error": e.name}), e.code

    @app.errorhandler(Exception)
    def server_error(e):
        app.logger.exception(f"[app] Unhandled error: {e}")
        return jsonify({"success": False, "error": str(e) or "Server Error"}), 500
