"""Seat model for the theater grid."""

from pydantic import BaseModel, Field


class Seat(BaseModel):
    """A single seat, addressed by zero-based row and column."""

    row: int = Field(..., ge=0, frozen=True)
    col: int = Field(..., ge=0, frozen=True)
    reserved: bool = False

    def reserve(self) -> None:
        self.reserved = True

    def cancel(self) -> None:
        self.reserved = False

    def __str__(self) -> str:
        return "[X]" if self.reserved else "[ ]"
