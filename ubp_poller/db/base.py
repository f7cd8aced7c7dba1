"""Declarative base and engine/session factories."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def build_database_url(database: str) -> str:
    """
    Turn the CLI database argument into an async SQLAlchemy URL.

    A bare path is treated as a SQLite file; anything containing ``://``
    is assumed to already be a SQLAlchemy URL and is passed through.
    """
    if "://" in database:
        return database
    return f"sqlite+aiosqlite:///{database}"


def create_engine(database: str, echo: bool = False) -> AsyncEngine:
    """Create the async engine for one run."""
    return create_async_engine(build_database_url(database), echo=echo, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory whose objects stay readable after commit."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
