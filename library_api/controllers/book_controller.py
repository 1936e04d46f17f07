from flask import Blueprint, current_app, jsonify, request

from library_api.errors import LibraryError
from library_api.extensions import db
from library_api.schemas.book import BookCreate, BookId, BorrowBook
from library_api.services.book_service import BookService
from library_api.utils.decorators import validate
from library_api.utils.params import coerce_params

book_bp = Blueprint("books", __name__, url_prefix="/api/books")


def _json_error(message, code=400):
    return jsonify({"success": False, "error": message}), code


def _rejected(e: LibraryError):
    current_app.logger.info(f"[books] {request.method} {request.path} rejected: {e.message}")
    return _json_error(e.message, e.status_code)


def _server_error(e: Exception):
    db.session.rollback()
    current_app.logger.exception(f"[books] {request.method} {request.path} failed: {e}")
    return _json_error(str(e) or "Server Error", 500)


@book_bp.post("/", strict_slashes=False)
@validate(BookCreate, "body")
def add_book(body: BookCreate):
    try:
        b = BookService.add_book(body.model_dump())
        current_app.logger.info(f"[books] created {b.id} (isbn={b.isbn})")
        return jsonify({"success": True, "data": b.to_dict()}), 201
    except LibraryError as e:
        return _rejected(e)
    except Exception as e:
        return _server_error(e)


@book_bp.get("/", strict_slashes=False)
def list_books():
    try:
        # anything other than true/false lists every book
        available = coerce_params(request.args.to_dict()).get("available")
        if not isinstance(available, bool):
            available = None

        books = BookService.list_books(available=available)
        return jsonify({
            "success": True,
            "count": len(books),
            "data": [b.to_dict() for b in books],
        })
    except Exception as e:
        return _server_error(e)


@book_bp.get("/<id>")
@validate(BookId, "params")
def get_book(params: BookId):
    try:
        b = BookService.get_book(params.id)
        return jsonify({"success": True, "data": b.to_dict()})
    except LibraryError as e:
        return _rejected(e)
    except Exception as e:
        return _server_error(e)


@book_bp.put("/<id>/borrow")
@validate(BookId, "params")
@validate(BorrowBook, "body")
def borrow_book(params: BookId, body: BorrowBook):
    try:
        b = BookService.borrow_book(params.id, body.borrower)
        current_app.logger.info(f"[books] {b.id} borrowed by {b.borrower}")
        return jsonify({"success": True, "data": b.to_dict()})
    except LibraryError as e:
        return _rejected(e)
    except Exception as e:
        return _server_error(e)


@book_bp.put("/<id>/return")
@validate(BookId, "params")
def return_book(params: BookId):
    try:
        b = BookService.return_book(params.id)
        current_app.logger.info(f"[books] {b.id} returned")
        return jsonify({"success": True, "data": b.to_dict()})
    except LibraryError as e:
        return _rejected(e)
    except Exception as e:
        return _server_error(e)
