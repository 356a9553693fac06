"""Pydantic schemas for lending reports."""

from pydantic import BaseModel, Field


class LoanSummary(BaseModel):
    """A book currently held by a user."""

    user_id: str
    user_name: str
    isbn: str
    title: str


class LendingStats(BaseModel):
    """Overall circulation statistics."""

    total_books: int = Field(..., ge=0)
    available_books: int = Field(..., ge=0)
    issued_books: int = Field(..., ge=0)
    total_users: int = Field(..., ge=0)
    users_at_limit: int = Field(..., ge=0)
