from sqlalchemy.exc import IntegrityError
from library_api.models.book import Book
from library_api.extensions import db
from library_api.errors import DuplicateIsbnError

class BookRepo:
    @staticmethod
    def create(fields: dict):
        book = Book(**fields)
        db.session.add(book)
        try:
            db.session.commit()
        except IntegrityError:
            # isbn unique index
            db.session.rollback()
            raise DuplicateIsbnError()
        return book

    @staticmethod
    def find(available=None):
        query = Book.query
        if available is not None:
            query = query.filter_by(available=available)
        return query.order_by(Book.created_at.asc(), Book.id.asc()).all()

    @staticmethod
    def find_by_id(book_id: str):
        return db.session.get(Book, book_id)

    @staticmethod
    def save(book: Book):
        db.session.add(book)
        db.session.commit()
        return book
