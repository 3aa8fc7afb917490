"""Computer Schemas.

Invariants:
    - status and user_id are optional; the repository applies the create default
      ('Active') and stores a falsy user_id as NULL
"""

from datetime import datetime

from pydantic import BaseModel


class ComputerPayload(BaseModel):
    """Create/update body for a computer."""
    hostname: str
    brand: str
    model: str
    cpu: str
    ram: int
    storage: int
    os: str
    status: str | None = None
    user_id: int | None = None


class ComputerOut(BaseModel):
    id: int
    hostname: str
    brand: str
    model: str
    cpu: str
    ram: int
    storage: int
    os: str
    status: str | None = None
    user_id: int | None = None
    created_at: datetime | None = None
