"""Root conftest: shared test configuration and an isolated database per test.

Invariants:
    - Every test gets its own file-backed SQLite database under tmp_path
    - PRAGMA foreign_keys=ON on every pooled connection, so SET NULL and CASCADE apply
    - The driver never autobegins; SQLAlchemy emits BEGIN itself, so DDL inside
      engine.begin() is transactional like it is on PostgreSQL
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy import event  # noqa: E402

from inventory.infrastructure.database import DatabaseSessionManager  # noqa: E402
from inventory.infrastructure.schema import init_schema  # noqa: E402


def build_sqlite_manager(path) -> DatabaseSessionManager:
    """Manager over a SQLite file with foreign keys and transactional DDL."""
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{path}")

    @event.listens_for(manager.engine.sync_engine, "connect")
    def _configure_connection(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
        dbapi_connection.isolation_level = None

    @event.listens_for(manager.engine.sync_engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return manager


@pytest.fixture
async def empty_db_manager(tmp_path):
    """Pool over a database with no tables yet."""
    manager = build_sqlite_manager(tmp_path / "inventory.db")
    yield manager
    await manager.dispose()


@pytest.fixture
async def db_manager(empty_db_manager):
    """Pool over a database with the inventory schema created."""
    assert await init_schema(empty_db_manager)
    return empty_db_manager
