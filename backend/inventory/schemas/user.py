"""User Schemas."""

from datetime import datetime

from pydantic import BaseModel


class UserPayload(BaseModel):
    """Create/update body; all four fields required (update is a full replace)."""
    name: str
    email: str
    department: str
    position: str


class UserOut(BaseModel):
    id: int
    name: str
    email: str
    department: str
    position: str
    created_at: datetime | None = None
