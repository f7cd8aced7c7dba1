"""
Transaction poller run metrics.

Counts what a single run did so the CLI can log one summary line.
"""

import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class PollStatus(str, Enum):
    """Status of a polling run."""

    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class AccountRunMetrics:
    """Counts for one account within a run."""

    account_id: str
    transactions_fetched: int = 0
    transactions_new: int = 0
    transactions_duplicate: int = 0
    notifications_sent: int = 0


@dataclass
class PollRunMetrics:
    """Metrics for a single polling run."""

    run_id: str = field(default_factory=lambda: uuid.uuid4().hex[:12])
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    ended_at: Optional[datetime] = None
    status: PollStatus = PollStatus.RUNNING

    accounts_total: int = 0
    accounts_processed: int = 0
    accounts: List[AccountRunMetrics] = field(default_factory=list)

    error: Optional[str] = None

    def start_account(self, account_id: str) -> AccountRunMetrics:
        account = AccountRunMetrics(account_id=account_id)
        self.accounts.append(account)
        return account

    def end(self, status: PollStatus, error: Optional[str] = None) -> None:
        self.status = status
        self.error = error
        self.ended_at = datetime.now(timezone.utc)

    @property
    def duration_seconds(self) -> float:
        end = self.ended_at or datetime.now(timezone.utc)
        return (end - self.started_at).total_seconds()

    def _total(self, name: str) -> int:
        return sum(getattr(account, name) for account in self.accounts)

    @property
    def transactions_fetched(self) -> int:
        return self._total("transactions_fetched")

    @property
    def transactions_new(self) -> int:
        return self._total("transactions_new")

    @property
    def transactions_duplicate(self) -> int:
        return self._total("transactions_duplicate")

    @property
    def notifications_sent(self) -> int:
        return self._total("notifications_sent")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a flat dictionary for logging."""
        data = asdict(self)
        data["started_at"] = self.started_at.isoformat()
        data["ended_at"] = self.ended_at.isoformat() if self.ended_at else None
        data["status"] = self.status.value
        data["duration_seconds"] = round(self.duration_seconds, 3)
        data["transactions_fetched"] = self.transactions_fetched
        data["transactions_new"] = self.transactions_new
        data["transactions_duplicate"] = self.transactions_duplicate
        data["notifications_sent"] = self.notifications_sent
        return data
