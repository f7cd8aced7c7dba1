"""Unit of Work pattern for managing database transactions."""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ubp_poller.core.errors import PersistError
from ubp_poller.db.models import Account, Record
from ubp_poller.db.repositories import AccountRepository, RecordRepository


class UnitOfWork:
    """
    Single entry point for repository operations sharing one session.

    Usage:
        async with UnitOfWork(session_factory) as uow:
            accounts = await uow.accounts.list_accounts()
            inserted = await uow.records.persist_if_new(data)
            await uow.commit()
    """

    def __init__(
        self,
        session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
        session: Optional[AsyncSession] = None,
    ):
        """
        Initialize Unit of Work.

        Args:
            session_factory: Factory used to open a session we own
            session: Optional existing session (useful for testing)
        """
        if session is None and session_factory is None:
            raise ValueError("UnitOfWork needs a session or a session factory")

        self._session_factory = session_factory
        self._session = session
        self._owned_session = session is None

        self.accounts: AccountRepository = None  # type: ignore
        self.records: RecordRepository = None  # type: ignore

    async def __aenter__(self):
        if self._owned_session:
            assert self._session_factory is not None
            self._session = self._session_factory()

        assert self._session is not None, "Session must be initialized"
        self.accounts = AccountRepository(Account, self._session)
        self.records = RecordRepository(Record, self._session)

        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            await self.rollback()
        elif self._owned_session:
            await self.commit()

        if self._owned_session and self._session:
            await self._session.close()

    async def commit(self):
        """Commit the current transaction."""
        if self._session:
            try:
                await self._session.commit()
            except SQLAlchemyError as e:
                raise PersistError(f"Commit failed: {e}") from e

    async def rollback(self):
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()
