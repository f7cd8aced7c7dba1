"""Account repository."""

from typing import List

from sqlalchemy.exc import SQLAlchemyError

from ubp_poller.core.errors import StoreError
from ubp_poller.db.models.account import Account
from ubp_poller.db.repository import BaseRepository


class AccountRepository(BaseRepository[Account]):
    """Repository for the accounts table."""

    async def list_accounts(self) -> List[Account]:
        """
        Load every configured account.

        Rows come back in store iteration order; no sort is applied.

        Raises:
            StoreError: If the query or row decoding fails. A partial list
                is never returned.
        """
        try:
            return await self.get_all()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load accounts: {e}") from e
