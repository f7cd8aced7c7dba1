"""
UnionBank partner API client.

Implements the password-grant token exchange and the single-page
transactions fetch on top of one shared httpx.AsyncClient.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

import httpx
import structlog
from pydantic import ValidationError

from ubp_poller.core.errors import AuthError, DecodeError, RemoteError
from ubp_poller.db.models import Account
from ubp_poller.transactions.clients.base import BaseTransactionClient
from ubp_poller.transactions.config import PollerConfig
from ubp_poller.transactions.models import (
    TokenResponse,
    TransactionPage,
    TransactionRecord,
)

logger = structlog.get_logger()


class UnionBankClient(BaseTransactionClient):
    """Client for the UnionBank partner accounts API."""

    def __init__(self, http: httpx.AsyncClient, config: PollerConfig):
        """
        Initialize the client.

        Args:
            http: Shared HTTP client, reused for every account in a run
            config: Poller configuration with endpoints and limits
        """
        self.http = http
        self.config = config

    @classmethod
    @asynccontextmanager
    async def open(
        cls,
        config: PollerConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> AsyncIterator["UnionBankClient"]:
        """
        Build the run's HTTP client behind the configured forward proxy.

        Args:
            config: Poller configuration
            transport: Optional transport override (tests use MockTransport)
        """
        if transport is not None:
            http = httpx.AsyncClient(timeout=config.api_timeout, transport=transport)
        else:
            http = httpx.AsyncClient(
                timeout=config.api_timeout, proxy=config.proxy_url
            )

        async with http:
            yield cls(http, config)

    def get_source_name(self) -> str:
        return "unionbank"

    async def fetch_access_token(self, account: Account) -> str:
        data = {
            "grant_type": "password",
            "client_id": account.client_id,
            "username": account.username,
            "password": account.password,
            "scope": self.config.token_scope,
        }
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/x-www-form-urlencoded",
        }

        try:
            response = await self.http.post(
                self.config.token_url, data=data, headers=headers
            )
        except httpx.HTTPError as e:
            raise AuthError(
                f"Token request failed for account {account.id}: {e}"
            ) from e

        if response.status_code >= 400:
            raise AuthError(
                f"Token request for account {account.id} returned "
                f"HTTP {response.status_code}: {response.text[:200]}"
            )

        try:
            token = TokenResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise AuthError(
                f"Could not decode token response for account {account.id}: {e}"
            ) from e

        logger.debug("auth.token_acquired", account_id=account.id)
        return token.access_token

    async def fetch_transactions(
        self, account: Account, token: str
    ) -> List[TransactionRecord]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "x-ibm-client-id": account.client_id,
            "x-ibm-client-secret": account.client_secret,
            "x-partner-id": account.partner_id,
            "Authorization": f"Bearer {token}",
        }

        try:
            response = await self.http.get(
                self.config.transactions_url,
                params={"limit": self.config.page_limit},
                headers=headers,
            )
        except httpx.HTTPError as e:
            raise RemoteError(
                f"Transactions request failed for account {account.id}: {e}"
            ) from e

        if response.status_code != 200:
            raise RemoteError(
                f"Transactions request for account {account.id} returned "
                f"HTTP {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            page = TransactionPage.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(
                f"Could not decode transactions for account {account.id}: {e}"
            ) from e

        # More than page_limit transactions are silently truncated.
        if len(page.records) >= self.config.page_limit:
            logger.warning(
                "fetch.page_full",
                account_id=account.id,
                limit=self.config.page_limit,
            )

        return page.records
