"""Lending service for issuing and returning books."""

import logging
from typing import Optional

from ..library.catalog import Catalog
from ..library.models import Book, User
from ..library.registry import Registry
from .schemas import LendingStats, LoanSummary

logger = logging.getLogger(__name__)


class LendingService:
    """Issues and returns books between a catalog and a registry.

    The service holds no records itself. A book is unavailable exactly when
    one registered user's borrowed collection contains it, and issue/return
    are the only operations that change either side of that pairing.
    """

    def __init__(self, catalog: Catalog, registry: Registry):
        """Initialize the lending service.

        Args:
            catalog: Catalog owning the books
            registry: Registry owning the users
        """
        self.catalog = catalog
        self.registry = registry

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def issue_book(self, user_id: Optional[str], isbn: Optional[str]) -> bool:
        """Issue a book to a user.

        Args:
            user_id: ID of the borrowing user
            isbn: ISBN of the book

        Returns:
            True if the book was issued. False if either is unknown, the
            book is already issued, or the user is at the borrow limit.
        """
        user, book = self._resolve(user_id, isbn)
        if user is None or book is None:
            logger.info("Issue refused: unknown user %r or book %r", user_id, isbn)
            return False

        if not book.is_available():
            logger.info("Issue refused: book %s is already issued", book.isbn)
            return False
        if not user.can_borrow_more():
            logger.info("Issue refused: user %s is at the borrow limit", user.user_id)
            return False

        if not user.borrow_book(book):
            logger.info("Issue refused: user %s already holds %s", user.user_id, book.isbn)
            return False
        book.set_available(False)

        logger.info("Issued book %s to user %s", book.isbn, user.user_id)
        return True

    def return_book(self, user_id: Optional[str], isbn: Optional[str]) -> bool:
        """Return a book from a user.

        Returns:
            True if the book was returned. False if either is unknown or the
            user does not hold the book.
        """
        user, book = self._resolve(user_id, isbn)
        if user is None or book is None:
            logger.info("Return refused: unknown user %r or book %r", user_id, isbn)
            return False

        if not user.return_book(book):
            logger.info("Return refused: user %s does not hold %s", user.user_id, book.isbn)
            return False
        book.set_available(True)

        logger.info("Returned book %s from user %s", book.isbn, user.user_id)
        return True

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_book_available(self, isbn: Optional[str]) -> bool:
        book = self.catalog.find_by_key(isbn)
        return book is not None and book.is_available()

    def can_user_borrow(self, user_id: Optional[str]) -> bool:
        user = self.registry.find_by_key(user_id)
        return user is not None and user.can_borrow_more()

    def borrower_of(self, isbn: Optional[str]) -> Optional[User]:
        """Find the user currently holding a book, if any."""
        book = self.catalog.find_by_key(isbn)
        if book is None or book.is_available():
            return None
        for user in self.registry.all_records():
            if user.has_borrowed(book):
                return user
        return None

    def active_loans(self) -> list[LoanSummary]:
        """List every book currently held, one row per user and book."""
        return [
            LoanSummary(
                user_id=user.user_id,
                user_name=user.name,
                isbn=book.isbn,
                title=book.title,
            )
            for user in self.registry.all_records()
            for book in user.borrowed_books
        ]

    def get_stats(self) -> LendingStats:
        """Get circulation statistics."""
        books = self.catalog.all_records()
        users = self.registry.all_records()
        available = sum(1 for b in books if b.is_available())

        return LendingStats(
            total_books=len(books),
            available_books=available,
            issued_books=len(books) - available,
            total_users=len(users),
            users_at_limit=sum(1 for u in users if not u.can_borrow_more()),
        )

    def _resolve(
        self, user_id: Optional[str], isbn: Optional[str]
    ) -> tuple[Optional[User], Optional[Book]]:
        return self.registry.find_by_key(user_id), self.catalog.find_by_key(isbn)
