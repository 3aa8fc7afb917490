"""Schema Initializer: idempotent CREATE TABLE IF NOT EXISTS for the three tables.

Invariants:
    - Existing tables are never dropped or altered
    - All three creations run inside one transaction (engine.begin()): all or nothing
    - Failure is logged and reported as False, never raised to the caller
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from inventory.db.base import Base
from inventory.infrastructure.database import DatabaseSessionManager
import inventory.models  # noqa: F401  (populates Base.metadata)

logger = logging.getLogger(__name__)


async def init_schema(db: DatabaseSessionManager) -> bool:
    """Create missing tables. Returns True on success, False if creation failed."""
    try:
        async with db.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    except (SQLAlchemyError, OSError) as e:
        logger.error(
            f"Error creating tables: {e}",
            extra={"operation": "create_schema"}, exc_info=True,
        )
        return False
    logger.info("Tables created successfully")
    return True
