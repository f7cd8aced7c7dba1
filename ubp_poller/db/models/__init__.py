"""Database models for the UnionBank transaction poller."""

from .account import Account
from .record import Record

__all__ = ["Account", "Record"]
