from datetime import datetime

from library_api.errors import BookAlreadyBorrowedError, BookNotBorrowedError, BookNotFoundError
from library_api.repositories.book_repo import BookRepo

# request field -> Book column
FIELD_MAP = {
    "title": "title",
    "author": "author",
    "isbn": "isbn",
    "publisher": "publisher",
    "publishedYear": "published_year",
    "genre": "genre",
    "available": "available",
}


class BookService:
    @staticmethod
    def add_book(data: dict):
        fields = {column: data[key] for key, column in FIELD_MAP.items() if key in data}
        return BookRepo.create(fields)

    @staticmethod
    def list_books(available=None):
        return BookRepo.find(available=available)

    @staticmethod
    def get_book(book_id: str):
        book = BookRepo.find_by_id(book_id)
        if not book:
            raise BookNotFoundError()
        return book

    @staticmethod
    def borrow_book(book_id: str, borrower: str):
        """
        Available -> Borrowed.

        Read-modify-write without a lock: two concurrent borrows of the same
        book can both pass the availability check.
        """
        book = BookService.get_book(book_id)

        if not book.available:
            raise BookAlreadyBorrowedError()

        book.available = False
        book.borrower = borrower
        book.borrow_date = datetime.utcnow()
        book.return_date = None

        return BookRepo.save(book)

    @staticmethod
    def return_book(book_id: str):
        """Borrowed -> Available. borrower and borrow_date are kept as history."""
        book = BookService.get_book(book_id)

        if book.available:
            raise BookNotBorrowedError()

        book.available = True
        book.return_date = datetime.utcnow()

        return BookRepo.save(book)
