"""Library facade.

Wires a catalog, a registry and a lending service together and offers the
public API used by callers.
"""

from typing import Optional

from ..config import Config, get_config
from ..lending.manager import LendingService
from ..lending.schemas import LendingStats, LoanSummary
from .catalog import Catalog
from .models import Book, User
from .registry import Registry


class Library:
    """An empty library with a catalog, a user registry and lending."""

    def __init__(self, strict: bool = False):
        """Initialize the library.

        Args:
            strict: Raise on None or duplicate books/users instead of
                ignoring them
        """
        self.catalog = Catalog(strict=strict)
        self.registry = Registry(strict=strict)
        self.lending = LendingService(self.catalog, self.registry)

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "Library":
        """Create a library using the configured strict mode."""
        config = config or get_config()
        return cls(strict=config.strict)

    # ---- catalog
    def add_book(self, book: Optional[Book]) -> None:
        self.catalog.add(book)

    def find_book_by_isbn(self, isbn: Optional[str]) -> Optional[Book]:
        return self.catalog.find_by_key(isbn)

    def find_books_by_title(self, title: Optional[str]) -> list[Book]:
        return self.catalog.search_by_title(title)

    def find_books_by_author(self, author: Optional[str]) -> list[Book]:
        return self.catalog.search_by_author(author)

    def get_all_books(self) -> list[Book]:
        return self.catalog.all_records()

    # ---- registry
    def register_user(self, user: Optional[User]) -> None:
        self.registry.register(user)

    def find_user_by_id(self, user_id: Optional[str]) -> Optional[User]:
        return self.registry.find_by_key(user_id)

    def get_all_users(self) -> list[User]:
        return self.registry.all_records()

    # ---- lending
    def issue_book(self, user_id: Optional[str], isbn: Optional[str]) -> bool:
        return self.lending.issue_book(user_id, isbn)

    def return_book(self, user_id: Optional[str], isbn: Optional[str]) -> bool:
        return self.lending.return_book(user_id, isbn)

    def is_book_available(self, isbn: Optional[str]) -> bool:
        return self.lending.is_book_available(isbn)

    def can_user_borrow(self, user_id: Optional[str]) -> bool:
        return self.lending.can_user_borrow(user_id)

    # ---- reporting
    def active_loans(self) -> list[LoanSummary]:
        return self.lending.active_loans()

    def get_stats(self) -> LendingStats:
        return self.lending.get_stats()
