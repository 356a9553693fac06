"""Book catalog and user registry."""

from .catalog import Catalog
from .exceptions import DuplicateRecordError, InvalidRecordError, LibraryError
from .models import Book, User
from .registry import Registry
from .schemas import BookStatus

__all__ = [
    "Book",
    "User",
    "BookStatus",
    "Catalog",
    "Registry",
    "LibraryError",
    "InvalidRecordError",
    "DuplicateRecordError",
]
