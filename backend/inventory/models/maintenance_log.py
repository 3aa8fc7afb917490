"""MaintenanceLog ORM: a service event recorded against one computer.

Invariants:
    - Owned by its computer: ON DELETE CASCADE removes logs with the computer
    - computer_id is nullable at the schema level but always set on create
    - status defaults to 'Scheduled' at the database level too
"""

import datetime as dt

from sqlalchemy import Integer, String, Text, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column

from inventory.core.domain_types import DEFAULT_MAINTENANCE_STATUS
from inventory.db.base import Base


class MaintenanceLog(Base):
    """Maintenance history entry."""
    __tablename__ = "maintenance_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    computer_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("computers.id", ondelete="CASCADE"), nullable=True,
    )
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    technician: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str | None] = mapped_column(
        String(20), server_default=DEFAULT_MAINTENANCE_STATUS,
    )
    created_at: Mapped[dt.datetime | None] = mapped_column(
        DateTime, server_default=func.now(),
    )
