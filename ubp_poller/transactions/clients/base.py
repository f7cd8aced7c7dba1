"""
Base transaction API client interface.

Defines the contract a partner bank client implements.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ubp_poller.db.models import Account
from ubp_poller.transactions.models import TransactionRecord


class BaseTransactionClient(ABC):
    """Abstract base class for partner transaction API clients."""

    @abstractmethod
    async def fetch_access_token(self, account: Account) -> str:
        """
        Exchange the account's credentials for a bearer token.

        Raises:
            AuthError: If the exchange fails or the body cannot be decoded
        """
        pass

    @abstractmethod
    async def fetch_transactions(
        self, account: Account, token: str
    ) -> List[TransactionRecord]:
        """
        Fetch the most recent page of transactions for an account.

        Raises:
            RemoteError: If the request fails or returns a non-200 status
            DecodeError: If the body is not the expected JSON
        """
        pass

    @abstractmethod
    def get_source_name(self) -> str:
        """Return the source identifier (e.g. 'unionbank')."""
        pass

    def normalize_record(
        self, account_id: str, record: TransactionRecord
    ) -> Dict[str, Any]:
        """
        Map a wire record to the records table columns.

        Args:
            account_id: Owning account identifier
            record: Record from the API

        Returns:
            Dictionary matching the Record model
        """
        return {
            "account_id": account_id,
            "tran_id": record.tran_id,
            "tran_type": record.tran_type,
            "amount": record.amount,
            "currency": record.currency,
            "tran_date": record.tran_date,
            "remarks2": record.remarks2,
            "remarks": record.remarks,
            "balance_currency": record.balance_currency,
            "posted_date": record.posted_date,
            "tran_description": record.tran_description,
        }
