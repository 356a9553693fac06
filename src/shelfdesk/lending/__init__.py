"""Book lending module.

Provides functionality for:
- Issuing books to registered users
- Returning issued books
- Availability and borrow-limit checks
- Circulation statistics
"""

from .manager import LendingService
from .schemas import LendingStats, LoanSummary

__all__ = [
    "LendingService",
    "LendingStats",
    "LoanSummary",
]
