"""
Request schemas for the book endpoints.

Each schema is a pydantic model: unknown fields are dropped and defaults are
applied. ``MESSAGES`` maps ``(field, error type)`` to the message reported to
the client; anything not listed keeps pydantic's own wording.
"""
from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Dict, List, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError


class RequestSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    MESSAGES: ClassVar[Dict[Tuple[str, str], str]] = {}


class BookCreate(RequestSchema):
    title: str = Field(min_length=1, max_length=100)
    author: str = Field(min_length=1)
    isbn: str = Field(min_length=1)
    publisher: Optional[str] = None
    publishedYear: Optional[int] = None
    genre: Optional[str] = None
    available: bool = Field(default=True, strict=True)

    MESSAGES: ClassVar[Dict[Tuple[str, str], str]] = {
        ("title", "missing"): "Title is required",
        ("title", "string_too_short"): "Title can't be empty",
        ("title", "string_too_long"): "Title is too long - max 100 chars",
        ("author", "string_too_short"): "Please provide author name",
        ("isbn", "missing"): "Missing ISBN number",
        ("isbn", "string_too_short"): "Enter a valid ISBN",
    }

    @field_validator("publishedYear", mode="before")
    @classmethod
    def whole_number(cls, value):
        if value is None:
            return value
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise PydanticCustomError("year_type", "Published year must be a number")
        if isinstance(value, float) and not value.is_integer():
            raise PydanticCustomError("year_not_integer", "Published year must be an integer")
        return int(value)

    @field_validator("publishedYear")
    @classmethod
    def year_range(cls, value):
        if value is None:
            return value
        if value < 1000:
            raise PydanticCustomError("year_too_old", "Invalid published year")
        if value > date.today().year:
            raise PydanticCustomError("year_in_future", "Published year cannot be in the future")
        return value


class BorrowBook(RequestSchema):
    borrower: str = Field(min_length=1)

    MESSAGES: ClassVar[Dict[Tuple[str, str], str]] = {
        ("borrower", "missing"): "Borrower name is required",
        ("borrower", "string_type"): "Borrower name must be a string",
        ("borrower", "string_too_short"): "Borrower name cannot be empty",
    }


class BookId(RequestSchema):
    id: str = Field(min_length=1)

    MESSAGES: ClassVar[Dict[Tuple[str, str], str]] = {
        ("id", "missing"): "Book ID is required",
        ("id", "string_type"): "Book ID must be a string",
        ("id", "string_too_short"): "Book ID cannot be empty",
    }


@dataclass(frozen=True)
class Issue:
    path: str
    message: str

    def to_dict(self):
        return {"path": self.path, "message": self.message}


@dataclass(frozen=True)
class Valid:
    value: RequestSchema
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Invalid:
    issues: List[Issue]
    ok: ClassVar[bool] = False


ValidationResult = Union[Valid, Invalid]


def validate_payload(schema: Type[RequestSchema], data) -> ValidationResult:
    """Run ``schema`` against ``data`` and report every violated rule in order."""
    try:
        value = schema.model_validate(data)
    except ValidationError as exc:
        return Invalid([_to_issue(schema, err) for err in exc.errors()])
    return Valid(value)


def _to_issue(schema: Type[RequestSchema], err) -> Issue:
    loc = err.get("loc") or ()
    path = ".".join(str(part) for part in loc)
    field = str(loc[0]) if loc else ""
    message = schema.MESSAGES.get((field, err["type"]), err["msg"])
    return Issue(path=path, message=message)
