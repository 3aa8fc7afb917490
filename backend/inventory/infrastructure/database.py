"""Database Session Manager: async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Every session is closed on exit, so its connection returns to the pool
      on success and on failure alike
    - All SQLAlchemy exceptions, and unwrapped driver OSErrors (refused or dropped
      connections), mapped to DatabaseError carrying the driver message

Design Decisions:
    - No module-level singleton: the lifespan builds one manager and stores it on
      app.state; repositories receive it through api/dependencies.py
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
import ssl
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from inventory.core.errors import DatabaseError

logger = logging.getLogger(__name__)


def _relaxed_ssl_context() -> ssl.SSLContext:
    """TLS without certificate verification (managed hosts with self-signed chains)."""
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def describe_db_error(exc: SQLAlchemyError) -> str:
    """Driver-level message without SQLAlchemy's statement/params suffix."""
    orig = getattr(exc, "orig", None)
    if orig is not None and str(orig):
        return str(orig)
    return str(exc)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 10,
        max_overflow: int = 10,
        ssl_enabled: bool = False,
    ):
        connect_args = {"ssl": _relaxed_ssl_context()} if ssl_enabled else {}
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
            connect_args=connect_args,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}", extra={"operation": "commit"})
            raise DatabaseError(describe_db_error(e), "commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}", extra={"operation": "execute"})
            raise DatabaseError(describe_db_error(e), "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}", extra={"operation": "query"})
            raise DatabaseError(describe_db_error(e), "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}", extra={"operation": "unknown"})
            raise DatabaseError(describe_db_error(e), "unknown") from e
        except OSError as e:
            # asyncpg raises connection refusals/drops unwrapped
            await session.rollback()
            logger.error(f"DB connection error: {e}", extra={"operation": "connect"})
            raise DatabaseError(str(e), "connect") from e
        finally:
            await session.close()

    async def check_connection(self) -> None:
        """Acquire and release one pooled connection. Raises on failure."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
