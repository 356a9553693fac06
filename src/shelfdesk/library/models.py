"""Entity models for the library catalog.

Books and users are pydantic models so that construction with a blank
identifying or required field fails immediately with a ``ValidationError``.
Equality and hashing are keyed on the identifier only.
"""

from typing import ClassVar, Optional

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from .schemas import BookStatus


def is_blank(value: object) -> bool:
    """True for None, non-strings, and empty or whitespace-only strings."""
    return not isinstance(value, str) or not value.strip()


def _require_text(value: Optional[str], label: str) -> str:
    if is_blank(value):
        raise ValueError(f"{label} cannot be null or empty")
    return value


class Book(BaseModel):
    """A book in the catalog, identified by its ISBN.

    Every book starts available. The flag is private and only changes
    through ``set_available``.
    """

    isbn: str = Field(..., frozen=True, description="Unique book identifier")
    title: str = Field(..., frozen=True)
    author: str = Field(..., frozen=True)

    _available: bool = PrivateAttr(default=True)

    @field_validator("isbn", mode="before")
    @classmethod
    def validate_isbn(cls, v):
        return _require_text(v, "Book ISBN")

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v):
        return _require_text(v, "Book title")

    @field_validator("author", mode="before")
    @classmethod
    def validate_author(cls, v):
        return _require_text(v, "Book author")

    def __init__(self, isbn: str, title: str, author: str) -> None:
        super().__init__(isbn=isbn, title=title, author=author)

    @property
    def available(self) -> bool:
        return self._available

    def is_available(self) -> bool:
        return self._available

    def set_available(self, available: bool) -> None:
        """Set the availability flag.

        Callers are responsible for keeping this consistent with the
        borrowing user's collection.
        """
        if not isinstance(available, bool):
            raise TypeError(f"available must be a bool, got {type(available).__name__}")
        self._available = available

    @property
    def status(self) -> BookStatus:
        return BookStatus.AVAILABLE if self._available else BookStatus.ISSUED

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.isbn == other.isbn

    def __hash__(self) -> int:
        return hash(self.isbn)

    def __repr__(self) -> str:
        return (
            f"Book(isbn={self.isbn!r}, title={self.title!r}, "
            f"author={self.author!r}, available={self.available})"
        )


class User(BaseModel):
    """A registered library user and the books they currently hold."""

    MAX_BORROW_LIMIT: ClassVar[int] = 3

    user_id: str = Field(..., frozen=True, description="Unique user identifier")
    name: str = Field(..., frozen=True)

    _borrowed: list[Book] = PrivateAttr(default_factory=list)

    @field_validator("user_id", mode="before")
    @classmethod
    def validate_user_id(cls, v):
        return _require_text(v, "User ID")

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        return _require_text(v, "User name")

    def __init__(self, user_id: str, name: str) -> None:
        super().__init__(user_id=user_id, name=name)

    def __copy__(self) -> "User":
        copied = super().__copy__()
        copied._borrowed = list(self._borrowed)
        return copied

    @property
    def borrowed_books(self) -> tuple[Book, ...]:
        """Read-only view of the borrowed books, in borrow order."""
        return tuple(self._borrowed)

    def has_borrowed(self, book: Optional[Book]) -> bool:
        return book is not None and book in self._borrowed

    def can_borrow_more(self) -> bool:
        return len(self._borrowed) < self.MAX_BORROW_LIMIT

    def borrow_book(self, book: Optional[Book]) -> bool:
        """Add a book to this user's collection.

        Returns:
            False without changing anything if the book is None, already
            held, or the borrow limit has been reached
        """
        if book is None:
            return False
        if not self.can_borrow_more() or book in self._borrowed:
            return False
        self._borrowed.append(book)
        return True

    def return_book(self, book: Optional[Book]) -> bool:
        """Remove a book from this user's collection.

        Returns:
            False if the book is None or was not borrowed by this user
        """
        if book is None or book not in self._borrowed:
            return False
        self._borrowed.remove(book)
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.user_id == other.user_id

    def __hash__(self) -> int:
        return hash(self.user_id)

    def __repr__(self) -> str:
        return (
            f"User(user_id={self.user_id!r}, name={self.name!r}, "
            f"borrowed={len(self._borrowed)})"
        )
