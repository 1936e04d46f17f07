class LibraryError(Exception):
    """Base exception for book inventory errors."""

    status_code = 400
    message = "Library error"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message


class BookNotFoundError(LibraryError):
    """Requested book id does not exist."""

    status_code = 404
    message = "Book not found"


class DuplicateIsbnError(LibraryError):
    """Another book already uses this ISBN."""

    message = "Book with this ISBN already exists"


class BookAlreadyBorrowedError(LibraryError):
    """Borrow attempted on a book that is on loan."""

    message = "Book is already borrowed"


class BookNotBorrowedError(LibraryError):
    """Return attempted on a book that is not on loan."""

    message = "Book is not currently borrowed"
