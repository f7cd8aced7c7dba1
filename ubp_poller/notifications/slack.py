"""Webhook notifier posting Slack-style ``{"text": ...}`` messages."""

from typing import Optional

import httpx
import structlog

from ubp_poller.core.errors import NotifyError
from ubp_poller.db.models import Account
from ubp_poller.notifications.formatter import format_message
from ubp_poller.transactions.models import TransactionRecord

logger = structlog.get_logger()


class SlackNotifier:
    """Posts one message per new transaction to an incoming webhook."""

    def __init__(
        self,
        webhook_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.webhook_url = webhook_url
        self.timeout = timeout
        self._transport = transport

    async def notify(self, account: Account, record: TransactionRecord) -> None:
        """
        Format and deliver a notification for a stored record.

        Raises:
            NotifyError: If the record cannot be formatted or the post fails
        """
        text = format_message(account, record)
        await self.send(text)
        logger.debug(
            "notify.sent", account_id=account.id, tran_id=record.tran_id
        )

    async def send(self, text: str) -> None:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.webhook_url, json={"text": text})
        except httpx.HTTPError as e:
            raise NotifyError(f"Webhook post failed: {e}") from e

        if response.status_code >= 400:
            raise NotifyError(
                f"Webhook returned HTTP {response.status_code}: {response.text[:200]}"
            )
