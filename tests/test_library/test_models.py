"""Tests for the Book and User models."""

import copy

import pytest
from pydantic import ValidationError

from shelfdesk.library.models import Book, User
from shelfdesk.library.schemas import BookStatus


class TestBook:
    """Tests for Book construction and identity."""

    def test_create_book(self):
        """Test a new book keeps its fields and is available."""
        book = Book("isbn1", "T1", "A1")

        assert book.isbn == "isbn1"
        assert book.title == "T1"
        assert book.author == "A1"
        assert book.is_available() is True
        assert book.status == BookStatus.AVAILABLE

    @pytest.mark.parametrize(
        "isbn,title,author",
        [
            (None, "Title", "Author"),
            ("", "Title", "Author"),
            ("   ", "Title", "Author"),
            ("isbn", None, "Author"),
            ("isbn", "", "Author"),
            ("isbn", "Title", "\t"),
            ("isbn", "Title", None),
        ],
    )
    def test_blank_fields_rejected(self, isbn, title, author):
        """Test that blank identifying or required fields raise."""
        with pytest.raises(ValidationError):
            Book(isbn, title, author)

    def test_validation_error_is_value_error(self):
        """Test callers can catch construction failures as ValueError."""
        with pytest.raises(ValueError, match="Book title cannot be null or empty"):
            Book("isbn", " ", "Author")

    def test_set_available(self):
        """Test toggling availability."""
        book = Book("isbn1", "T1", "A1")
        book.set_available(False)

        assert book.is_available() is False
        assert book.status == BookStatus.ISSUED

        book.set_available(True)
        assert book.is_available() is True

    def test_constructor_cannot_create_issued_book(self):
        """Test availability cannot be set at construction time."""
        with pytest.raises(TypeError):
            Book("isbn1", "T1", "A1", available=False)

        book = Book.model_validate(
            {"isbn": "isbn1", "title": "T1", "author": "A1", "available": False}
        )
        assert book.is_available() is True

    def test_availability_only_changes_through_setter(self):
        """Test the flag cannot be assigned directly or set to a non-bool."""
        book = Book("isbn1", "T1", "A1")

        with pytest.raises((AttributeError, ValueError)):
            book.available = "no"
        with pytest.raises(TypeError):
            book.set_available("no")
        assert book.is_available() is True

    def test_isbn_is_immutable(self):
        """Test the ISBN cannot be reassigned."""
        book = Book("isbn1", "T1", "A1")
        with pytest.raises(ValidationError):
            book.isbn = "isbn2"

    def test_equality_by_isbn(self):
        """Test books with the same ISBN are equal regardless of other fields."""
        first = Book("isbn1", "T1", "A1")
        second = Book("isbn1", "Other", "Someone")

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1
        assert first != Book("isbn2", "T1", "A1")


class TestUser:
    """Tests for User construction and borrowing."""

    def test_create_user(self):
        """Test a new user has no books."""
        user = User("u1", "Alice")

        assert user.user_id == "u1"
        assert user.name == "Alice"
        assert user.borrowed_books == ()
        assert user.can_borrow_more() is True

    @pytest.mark.parametrize("user_id,name", [(None, "Alice"), ("", "Alice"), ("u1", "  ")])
    def test_blank_fields_rejected(self, user_id, name):
        """Test that blank ID or name raise."""
        with pytest.raises(ValidationError):
            User(user_id, name)

    def test_borrow_book(self):
        """Test borrowing appends to the collection."""
        user = User("u1", "Alice")
        book = Book("isbn1", "T1", "A1")

        assert user.borrow_book(book) is True
        assert user.borrowed_books == (book,)
        assert user.has_borrowed(book)

    def test_borrow_none(self):
        """Test borrowing None fails."""
        user = User("u1", "Alice")
        assert user.borrow_book(None) is False
        assert user.borrowed_books == ()

    def test_borrow_same_book_twice(self):
        """Test the same ISBN cannot be held twice, even via another instance."""
        user = User("u1", "Alice")
        user.borrow_book(Book("isbn1", "T1", "A1"))

        assert user.borrow_book(Book("isbn1", "Copy", "A1")) is False
        assert len(user.borrowed_books) == 1

    def test_borrow_limit(self):
        """Test the borrow limit caps the collection."""
        user = User("u1", "Alice")
        for i in range(User.MAX_BORROW_LIMIT):
            assert user.borrow_book(Book(f"isbn{i}", f"T{i}", "A"))

        assert user.can_borrow_more() is False
        assert user.borrow_book(Book("extra", "Extra", "A")) is False
        assert len(user.borrowed_books) == User.MAX_BORROW_LIMIT

    def test_return_book(self):
        """Test returning removes the book."""
        user = User("u1", "Alice")
        book = Book("isbn1", "T1", "A1")
        user.borrow_book(book)

        assert user.return_book(book) is True
        assert user.borrowed_books == ()

    def test_return_not_borrowed(self):
        """Test returning a book that was never borrowed fails."""
        user = User("u1", "Alice")
        assert user.return_book(Book("isbn1", "T1", "A1")) is False
        assert user.return_book(None) is False

    def test_borrowed_books_is_read_only(self):
        """Test the borrowed view cannot mutate the collection."""
        user = User("u1", "Alice")
        user.borrow_book(Book("isbn1", "T1", "A1"))

        view = user.borrowed_books
        with pytest.raises(AttributeError):
            view.append(Book("isbn2", "T2", "A2"))
        assert len(user.borrowed_books) == 1

    def test_equality_by_user_id(self):
        """Test users compare by ID only."""
        assert User("u1", "Alice") == User("u1", "Someone Else")
        assert hash(User("u1", "Alice")) == hash(User("u1", "Bob"))
        assert User("u1", "Alice") != User("u2", "Alice")

    def test_constructor_rejects_extra_fields(self):
        with pytest.raises(TypeError):
            User("u1", "Alice", borrowed=[])

    @pytest.mark.parametrize(
        "make_copy",
        [
            lambda u: u.model_copy(),
            lambda u: u.model_copy(deep=True),
            copy.copy,
            copy.deepcopy,
        ],
    )
    def test_copy_does_not_share_borrowed_books(self, make_copy):
        """Test borrowing through a copy leaves the original untouched."""
        user = User("u1", "Alice")
        held = Book("isbn1", "T1", "A1")
        user.borrow_book(held)

        copied = make_copy(user)
        copied.borrow_book(Book("isbn2", "T2", "A2"))
        copied.return_book(held)

        assert user.borrowed_books == (held,)
        assert copied.borrowed_books == (Book("isbn2", "T2", "A2"),)
