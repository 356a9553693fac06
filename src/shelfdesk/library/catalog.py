"""Book catalog: ISBN-keyed storage and text search."""

import logging
from typing import Optional

from .exceptions import DuplicateRecordError, InvalidRecordError
from .models import Book, is_blank

logger = logging.getLogger(__name__)


class Catalog:
    """In-memory store of books keyed by ISBN.

    Adding a book whose ISBN is already present keeps the first one. With
    ``strict=True`` that case, and adding None, raise instead.
    """

    def __init__(self, strict: bool = False):
        """Initialize an empty catalog.

        Args:
            strict: Raise on None or duplicate books instead of ignoring them
        """
        self.strict = strict
        self._books: dict[str, Book] = {}

    def add(self, book: Optional[Book]) -> None:
        """Add a book unless its ISBN is already catalogued."""
        if book is None:
            if self.strict:
                raise InvalidRecordError("Cannot add a null book")
            logger.warning("Attempted to add a null book")
            return
        if book.isbn in self._books:
            if self.strict:
                raise DuplicateRecordError("Book", book.isbn)
            logger.debug("Book %s already catalogued, keeping existing record", book.isbn)
            return
        self._books[book.isbn] = book
        logger.debug("Catalogued book %s (%s)", book.isbn, book.title)

    def find_by_key(self, isbn: Optional[str]) -> Optional[Book]:
        """Look up a book by exact ISBN.

        Returns:
            The book, or None for an unknown or blank ISBN
        """
        if is_blank(isbn):
            return None
        return self._books.get(isbn)

    def search_by_title(self, query: Optional[str]) -> list[Book]:
        """Case-insensitive substring search on titles."""
        return self._search(query, lambda book: book.title)

    def search_by_author(self, query: Optional[str]) -> list[Book]:
        """Case-insensitive substring search on authors."""
        return self._search(query, lambda book: book.author)

    def all_records(self) -> list[Book]:
        """Snapshot of every catalogued book, in no particular order."""
        return list(self._books.values())

    def _search(self, query, field) -> list[Book]:
        if is_blank(query):
            return []
        needle = query.lower()
        return [book for book in self._books.values() if needle in field(book).lower()]

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, isbn: object) -> bool:
        return isinstance(isbn, str) and isbn in self._books
