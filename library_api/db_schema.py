from sqlalchemy import inspect
from library_api.extensions import db

# models must be imported so their tables are registered on db.metadata
from library_api.models.book import Book  # noqa: F401


def ensure_schema(app):
    """
    Creates missing tables at startup. Existing tables are left untouched;
    column changes go through Flask-Migrate (`flask db migrate/upgrade`).
    """
    with app.app_context():
        existing = set(inspect(db.engine).get_table_names())
        missing = [t for t in db.metadata.sorted_tables if t.name not in existing]
        if not missing:
            return

        db.create_all()
        app.logger.info(f"[db] Created tables: {', '.join(t.name for t in missing)}")
