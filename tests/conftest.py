"""Pytest configuration and shared fixtures.

This module provides fixtures for testing shelfdesk, including sample
books, users and a populated library.
"""

import os
from typing import Generator

import pytest

from shelfdesk.config import reset_config
from shelfdesk.library.models import Book, User
from shelfdesk.library.tracker import Library


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_config() -> Generator[None, None, None]:
    """Reset global config and shelfdesk environment variables."""
    saved = {k: v for k, v in os.environ.items() if k.startswith("SHELFDESK_")}
    for key in saved:
        del os.environ[key]
    reset_config()
    yield
    reset_config()
    for key in [k for k in os.environ if k.startswith("SHELFDESK_")]:
        del os.environ[key]
    os.environ.update(saved)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def effective_java() -> Book:
    return Book("978-0321765723", "Effective Java", "Joshua Bloch")


@pytest.fixture
def clean_code() -> Book:
    return Book("978-0132350884", "Clean Code", "Robert C. Martin")


@pytest.fixture
def pragmatic_programmer() -> Book:
    return Book("111-2223334445", "The Pragmatic Programmer", "Andy Hunt")


@pytest.fixture
def refactoring() -> Book:
    return Book("978-0134757599", "Refactoring", "Martin Fowler")


@pytest.fixture
def alice() -> User:
    return User("user001", "Alice Smith")


@pytest.fixture
def bob() -> User:
    return User("user002", "Bob Jones")


@pytest.fixture
def library(effective_java, clean_code, pragmatic_programmer, refactoring, alice, bob) -> Library:
    """Create a library with four books and two users."""
    lib = Library()
    for book in (effective_java, clean_code, pragmatic_programmer, refactoring):
        lib.add_book(book)
    lib.register_user(alice)
    lib.register_user(bob)
    return lib
