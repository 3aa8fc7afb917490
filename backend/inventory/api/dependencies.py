"""Request Dependencies: hand each route its repository, built on the app's pool.

Invariants:
    - The DatabaseSessionManager lives on app.state (set by the lifespan), never
      in a module global
    - Tests replace get_db_manager via app.dependency_overrides
"""

from fastapi import Depends, Request

from inventory.core.repository_protocols import EntityRepository, StatsSource
from inventory.infrastructure.database import DatabaseSessionManager
from inventory.services.computer_repository import ComputerRepository
from inventory.services.maintenance_repository import MaintenanceLogRepository
from inventory.services.stats_reporter import StatsReporter
from inventory.services.user_repository import UserRepository


def get_db_manager(request: Request) -> DatabaseSessionManager:
    db = getattr(request.app.state, "db_manager", None)
    if db is None:
        raise RuntimeError("Database not initialized")
    return db


def get_user_repository(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> EntityRepository:
    return UserRepository(db)


def get_computer_repository(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> EntityRepository:
    return ComputerRepository(db)


def get_maintenance_repository(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> EntityRepository:
    return MaintenanceLogRepository(db)


def get_stats_reporter(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> StatsSource:
    return StatsReporter(db)
