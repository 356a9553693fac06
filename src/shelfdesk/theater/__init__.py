"""Theater seat reservation grid."""

from .manager import SeatNotFoundError, Theater
from .models import Seat

__all__ = [
    "Theater",
    "Seat",
    "SeatNotFoundError",
]
