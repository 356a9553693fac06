"""Theater seat reservations."""

import logging
from typing import Optional

from ..config import Config, get_config
from .models import Seat

logger = logging.getLogger(__name__)


class SeatNotFoundError(IndexError):
    """Row or column outside the theater grid."""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"No seat at row {row}, col {col}")


class Theater:
    """A fixed grid of seats that can be reserved and cancelled."""

    def __init__(self, rows: int, cols: int):
        """Initialize a theater with every seat free.

        Args:
            rows: Number of rows, at least 1
            cols: Seats per row, at least 1
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Theater must have at least one seat, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._seats = [[Seat(row=r, col=c) for c in range(cols)] for r in range(rows)]

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "Theater":
        config = config or get_config()
        return cls(config.theater_rows, config.theater_cols)

    def seat(self, row: int, col: int) -> Seat:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise SeatNotFoundError(row, col)
        return self._seats[row][col]

    def reserve_seat(self, row: int, col: int) -> bool:
        """Reserve a seat.

        Returns:
            False if the seat is already taken; the first free seat is then
            logged as a suggestion
        """
        seat = self.seat(row, col)
        if seat.reserved:
            suggestion = self.suggest_seat()
            if suggestion is None:
                logger.info("Seat (%d, %d) is taken and no seats are available", row, col)
            else:
                logger.info(
                    "Seat (%d, %d) is taken, suggested seat: row %d, col %d",
                    row, col, suggestion.row, suggestion.col,
                )
            return False

        seat.reserve()
        logger.info("Reserved seat (%d, %d)", row, col)
        return True

    def cancel_seat(self, row: int, col: int) -> bool:
        """Cancel a reservation. Returns False if the seat was already free."""
        seat = self.seat(row, col)
        if not seat.reserved:
            logger.info("Seat (%d, %d) is already available", row, col)
            return False
        seat.cancel()
        logger.info("Cancelled reservation for seat (%d, %d)", row, col)
        return True

    def suggest_seat(self) -> Optional[Seat]:
        """First free seat in row-major order, or None when sold out."""
        for row in self._seats:
            for seat in row:
                if not seat.reserved:
                    return seat
        return None

    def available_count(self) -> int:
        return sum(1 for row in self._seats for seat in row if not seat.reserved)

    def seating_chart(self) -> str:
        """Render the grid, one line per row."""
        return "\n".join(" ".join(str(seat) for seat in row) for row in self._seats)
