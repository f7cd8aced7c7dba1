"""
Transaction poller service.

Runs one pass over every configured account: fetch a token, fetch the
latest page of transactions, store the unseen ones, and optionally notify
for each stored record. The first error aborts the whole run.
"""

from typing import Any, Dict, List, Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ubp_poller.core.errors import PollerError
from ubp_poller.db.models import Account
from ubp_poller.db.unit_of_work import UnitOfWork
from ubp_poller.notifications.slack import SlackNotifier
from ubp_poller.transactions.clients.base import BaseTransactionClient
from ubp_poller.transactions.metrics import AccountRunMetrics, PollRunMetrics, PollStatus

logger = structlog.get_logger()


class TransactionPoller:
    """
    Sequential ingestion pipeline across all accounts.

    Accounts are processed one at a time in store order, and records one
    at a time within an account. Errors are logged with account context and
    re-raised; the caller decides what an aborted run means.
    """

    def __init__(
        self,
        client: BaseTransactionClient,
        session_factory: async_sessionmaker[AsyncSession],
        notifier: Optional[SlackNotifier] = None,
    ):
        """
        Initialize the poller.

        Args:
            client: Partner API client, shared by every account
            session_factory: Factory for the run's database session
            notifier: Notifier for new records; None disables notifications
        """
        self.client = client
        self.session_factory = session_factory
        self.notifier = notifier
        self.last_run: Optional[PollRunMetrics] = None

    async def poll_once(self) -> Dict[str, Any]:
        """
        Execute a single polling run over every account.

        Returns:
            Run summary (see PollRunMetrics.to_dict)

        Raises:
            PollerError: On the first failure; later accounts are not processed
        """
        run = PollRunMetrics()
        self.last_run = run

        logger.info(
            "poll.started",
            run_id=run.run_id,
            source=self.client.get_source_name(),
            notify=self.notifier is not None,
        )

        try:
            async with UnitOfWork(self.session_factory) as uow:
                accounts = await uow.accounts.list_accounts()
                run.accounts_total = len(accounts)
                logger.info("poll.accounts_loaded", run_id=run.run_id, count=len(accounts))

                await self.process_accounts(uow, accounts, run)
        except PollerError as e:
            run.end(PollStatus.FAILED, error=str(e))
            logger.error(
                "poll.failed",
                run_id=run.run_id,
                error=str(e),
                error_type=type(e).__name__,
                accounts_processed=run.accounts_processed,
                accounts_total=run.accounts_total,
            )
            raise

        run.end(PollStatus.SUCCESS)
        result = run.to_dict()

        logger.info(
            "poll.completed",
            run_id=run.run_id,
            accounts=run.accounts_processed,
            fetched=run.transactions_fetched,
            new=run.transactions_new,
            duplicate=run.transactions_duplicate,
            notified=run.notifications_sent,
            duration_seconds=result["duration_seconds"],
        )
        return result

    async def process_accounts(
        self, uow: UnitOfWork, accounts: List[Account], run: PollRunMetrics
    ) -> None:
        for account in accounts:
            with structlog.contextvars.bound_contextvars(account_id=account.id):
                await self.process_account(uow, account, run.start_account(account.id))
            run.accounts_processed += 1

    async def process_account(
        self, uow: UnitOfWork, account: Account, metrics: AccountRunMetrics
    ) -> None:
        """Token, fetch, store and notify for one account."""
        logger.info("account.started", account_name=account.name)

        token = await self.client.fetch_access_token(account)
        records = await self.client.fetch_transactions(account, token)
        metrics.transactions_fetched = len(records)

        logger.info("account.transactions_fetched", count=len(records))

        for record in records:
            record_data = self.client.normalize_record(account.id, record)
            inserted = await uow.records.persist_if_new(record_data)

            if not inserted:
                metrics.transactions_duplicate += 1
                logger.debug(
                    "storage.duplicate",
                    tran_id=record.tran_id,
                    tran_type=record.tran_type,
                )
                continue

            # Commit each insert so an abort later in the run keeps it.
            await uow.commit()
            metrics.transactions_new += 1
            logger.info(
                "storage.stored", tran_id=record.tran_id, tran_type=record.tran_type
            )

            if self.notifier is not None:
                await self.notifier.notify(account, record)
                metrics.notifications_sent += 1

        logger.info(
            "account.completed",
            new=metrics.transactions_new,
            duplicate=metrics.transactions_duplicate,
            notified=metrics.notifications_sent,
        )
