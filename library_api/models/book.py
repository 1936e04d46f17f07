import uuid
from datetime import datetime
from sqlalchemy.orm import validates
from library_api.extensions import db


def _new_id():
    return uuid.uuid4().hex


def _iso(value):
    return value.isoformat() + "Z" if value else None


class Book(db.Model):
    __tablename__ = "books"

    id = db.Column(db.String(32), primary_key=True, default=_new_id)
    title = db.Column(db.String(100), nullable=False, index=True)
    author = db.Column(db.Text, nullable=False)
    isbn = db.Column(db.String, unique=True, nullable=False, index=True)

    publisher = db.Column(db.Text, nullable=True)
    published_year = db.Column(db.Integer, nullable=True)
    genre = db.Column(db.Text, nullable=True)

    available = db.Column(db.Boolean, nullable=False, default=True, index=True)
    borrower = db.Column(db.Text, nullable=True)
    borrow_date = db.Column(db.DateTime, nullable=True)
    return_date = db.Column(db.DateTime, nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    @validates("title", "author", "isbn", "publisher", "genre")
    def _trim(self, key, value):
        return value.strip() if isinstance(value, str) else value

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
            "publisher": self.publisher,
            "publishedYear": self.published_year,
            "genre": self.genre,
            "available": self.available,
            "borrower": self.borrower,
            "borrowDate": _iso(self.borrow_date),
            "returnDate": _iso(self.return_date),
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
        }
