"""ORM Models: SQLAlchemy declarative models for the three inventory tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - User 1→N Computer (nullable FK, ON DELETE SET NULL)
    - Computer 1→N MaintenanceLog (ON DELETE CASCADE)

Design Decisions:
    - One file per entity; all imported here so Base.metadata is complete
      before the schema initializer runs create_all
"""

from inventory.models.user import User  # noqa: F401
from inventory.models.computer import Computer  # noqa: F401
from inventory.models.maintenance_log import MaintenanceLog  # noqa: F401
