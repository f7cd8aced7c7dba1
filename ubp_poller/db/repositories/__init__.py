"""Repository exports."""

from .account_repository import AccountRepository
from .record_repository import RecordRepository

__all__ = ["AccountRepository", "RecordRepository"]
