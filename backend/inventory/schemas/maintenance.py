"""Maintenance Log Schemas.

Invariants:
    - date is a calendar date (YYYY-MM-DD)
    - computer_hostname only appears in list responses (LEFT JOIN, may be null)
"""

import datetime as dt

from pydantic import BaseModel


class MaintenanceLogPayload(BaseModel):
    """Create/update body for a maintenance log."""
    computer_id: int | None = None
    date: dt.date
    type: str
    description: str
    technician: str
    status: str | None = None


class MaintenanceLogOut(BaseModel):
    id: int
    computer_id: int | None = None
    date: dt.date
    type: str
    description: str
    technician: str
    status: str | None = None
    created_at: dt.datetime | None = None


class MaintenanceLogListItem(MaintenanceLogOut):
    computer_hostname: str | None = None
