from decimal import Decimal, InvalidOperation
from typing import AsyncGenerator
import logging

from sqlalchemy import String
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

from app.core.config import settings
from app.core.exceptions import StorageFailureError

logger = logging.getLogger(__name__)


def _engine_options() -> dict:
    options = {"echo": settings.DEBUG, "future": True}
    if settings.DATABASE_URL.startswith("postgresql"):
        options.update(pool_pre_ping=True, pool_size=10, max_overflow=20)
        if settings.DATABASE_SSL:
            options["connect_args"] = {"ssl": "require"}
    return options


# Async Engine
async_engine = create_async_engine(settings.DATABASE_URL, **_engine_options())

# Async Session Factory
AsyncSessionLocal = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False
)

Base = declarative_base()


class ExactDecimal(TypeDecorator):
    """Decimal stored as its string form so no backend rounds it."""

    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        return str(value)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        try:
            return Decimal(value)
        except InvalidOperation as exc:
            raise StorageFailureError(f"Stored value {value!r} is not a decimal") from exc


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get async database session"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def persist(db: AsyncSession, instance):
    """Add, commit and refresh an instance; driver errors become StorageFailureError"""
    try:
        db.add(instance)
        await db.commit()
        await db.refresh(instance)
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.error(f"Failed to persist {type(instance).__name__}: {exc}")
        raise StorageFailureError(f"Failed to save {type(instance).__name__.lower()}") from exc
    return instance


async def commit(db: AsyncSession, instance):
    """Commit pending changes on an already tracked instance"""
    try:
        await db.commit()
        await db.refresh(instance)
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.error(f"Failed to update {type(instance).__name__}: {exc}")
        raise StorageFailureError(f"Failed to update {type(instance).__name__.lower()}") from exc
    return instance
