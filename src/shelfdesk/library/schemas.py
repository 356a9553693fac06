"""Enums shared by the catalog and lending modules."""

from enum import Enum


class BookStatus(str, Enum):
    """Circulation state of a book."""

    AVAILABLE = "available"
    ISSUED = "issued"  # Held by exactly one user
