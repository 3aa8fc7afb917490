"""Shared response schemas."""

from pydantic import BaseModel


class MessageOut(BaseModel):
    """Delete confirmation."""
    message: str


class StatsOut(BaseModel):
    """Whole-table counts."""
    computers: int
    users: int
    maintenance: int
