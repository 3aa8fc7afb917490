"""Computer ORM: an asset optionally assigned to a user.

Invariants:
    - hostname is globally unique
    - user_id is a weak reference: deleting the user sets it to NULL
    - status defaults to 'Active' at the database level too

Design Decisions:
    - ram/storage are plain integers; units are left to the client
"""

from datetime import datetime

from sqlalchemy import Integer, String, DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column

from inventory.core.domain_types import DEFAULT_COMPUTER_STATUS
from inventory.db.base import Base


class Computer(Base):
    """Computer asset."""
    __tablename__ = "computers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    hostname: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    brand: Mapped[str] = mapped_column(String(50), nullable=False)
    model: Mapped[str] = mapped_column(String(50), nullable=False)
    cpu: Mapped[str] = mapped_column(String(100), nullable=False)
    ram: Mapped[int] = mapped_column(Integer, nullable=False)
    storage: Mapped[int] = mapped_column(Integer, nullable=False)
    os: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str | None] = mapped_column(
        String(20), server_default=DEFAULT_COMPUTER_STATUS,
    )
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True,
    )
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime, server_default=func.now(),
    )
