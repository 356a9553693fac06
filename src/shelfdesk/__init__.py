"""In-memory library circulation and theater seating."""

import logging

from .library import (
    Book,
    BookStatus,
    Catalog,
    DuplicateRecordError,
    InvalidRecordError,
    LibraryError,
    Registry,
    User,
)
from .library.tracker import Library
from .lending import LendingService, LendingStats, LoanSummary
from .theater import Seat, SeatNotFoundError, Theater

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # library
    "Library",
    "Book",
    "User",
    "BookStatus",
    "Catalog",
    "Registry",
    # lending
    "LendingService",
    "LendingStats",
    "LoanSummary",
    # theater
    "Theater",
    "Seat",
    # errors
    "LibraryError",
    "InvalidRecordError",
    "DuplicateRecordError",
    "SeatNotFoundError",
]
