"""Record repository with natural-key deduplication."""

from typing import Any, Dict

from sqlalchemy.exc import SQLAlchemyError

from ubp_poller.core.errors import PersistError
from ubp_poller.db.models.record import Record
from ubp_poller.db.repository import BaseRepository


class RecordRepository(BaseRepository[Record]):
    """Repository for stored transaction records."""

    async def exists_by_natural_key(self, tran_id: str, tran_type: str) -> bool:
        """Check for a stored record with this (tran_id, tran_type), any account."""
        return await self.exists(tran_id=tran_id, tran_type=tran_type)

    async def persist_if_new(self, record_data: Dict[str, Any]) -> bool:
        """
        Insert a record unless one with the same natural key is stored.

        The check and the insert are two statements. Concurrent writers can
        race between them; runs are expected not to overlap.

        Args:
            record_data: Column values, as built by the client's
                ``normalize_record``

        Returns:
            True if the record was inserted, False if it already existed

        Raises:
            PersistError: If either statement fails
        """
        try:
            if await self.exists_by_natural_key(
                record_data["tran_id"], record_data["tran_type"]
            ):
                return False

            await self.create(**record_data)
            return True
        except SQLAlchemyError as e:
            raise PersistError(
                f"Failed to persist record {record_data.get('tran_id')}: {e}"
            ) from e
