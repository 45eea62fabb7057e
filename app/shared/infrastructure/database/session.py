# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (conversations with the database), making sure each request
# gets its own clean session and that its changes are either all saved or all undone.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy session management with a FastAPI dependency, commit-on-success /
# rollback-on-error transactions, and a context manager for work outside a request.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - app/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - All module repository implementations (request sessions)
# - app.modules.devices (delayed sync completion in a background task)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.shared.core.exceptions import CareAppException, DatabaseError, TransactionError
from app.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with transaction handling and automatic cleanup.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker] = None
        self._initialized = False

    async def initialize(self, engine: Optional[AsyncEngine] = None) -> None:
        """Initialize the session factory, by default on the global engine."""
        try:
            engine = engine or await get_database_engine()
            self._session_factory = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=True,
            )
            self._initialized = True
            logger.info("Database session factory initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize database session factory: {e}")
            raise DatabaseError(f"Session initialization failed: {e}")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Yield a session that commits when the block succeeds and rolls back otherwise.

        Application exceptions are re-raised unchanged so their messages reach the caller.
        """
        if not self._initialized or self._session_factory is None:
            raise DatabaseError("Session manager not initialized")

        session: AsyncSession = self._session_factory()
        try:
            yield session
            await session.commit()
            logger.debug("Database transaction committed successfully")
        except CareAppException:
            await session.rollback()
            raise
        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise DatabaseError(f"Database operation failed: {e}")
        except Exception as e:
            await session.rollback()
            logger.error(f"Unexpected error occurred, transaction rolled back: {e}")
            raise TransactionError(f"Transaction failed: {e}")
        finally:
            await session.close()

    def is_initialized(self) -> bool:
        return self._initialized

    def reset(self) -> None:
        self._session_factory = None
        self._initialized = False


# Global session manager instance
session_manager = DatabaseSessionManager()


async def initialize_sessions(engine: Optional[AsyncEngine] = None) -> None:
    """Initialize the global database session manager."""
    await session_manager.initialize(engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a transactional database session.

    Usage:
        class RecipientRepositoryImpl(RecipientRepository):
            def __init__(self, session: AsyncSession = Depends(get_db_session)):
                ...
    """
    async with session_manager.get_session() as session:
        yield session


@asynccontextmanager
async def database_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager for database work outside FastAPI route handlers.

    Example:
        async with database_session() as db:
            device = await DeviceRepositoryImpl(db).get_by_id(device_id)
    """
    async with session_manager.get_session() as session:
        yield session
