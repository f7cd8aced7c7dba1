"""
Transaction poller configuration.

Partner endpoints, request parameters and the per-run switches derived
from settings and command-line flags.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ubp_poller.core.config import Settings, get_settings
from ubp_poller.core.errors import ConfigError

UBP_TOKEN_URL = "https://api.unionbankph.com/ubp/external/partners/v1/oauth2/token"
UBP_TRANSACTIONS_URL = (
    "https://api.unionbankph.com/ubp/external/portal/accounts/v1/transactions/paginate"
)


class PollerConfig(BaseModel):
    """Main transaction poller configuration."""

    # API client settings
    token_url: str = Field(default=UBP_TOKEN_URL, description="Password-grant endpoint")
    transactions_url: str = Field(
        default=UBP_TRANSACTIONS_URL, description="Paginated transactions endpoint"
    )
    token_scope: str = Field(default="account_inquiry", description="OAuth scope")
    page_limit: int = Field(
        default=500, ge=1, description="Transactions requested per account (one page)"
    )
    api_timeout: float = Field(
        default=30.0, gt=0, description="API request timeout in seconds"
    )
    proxy_url: Optional[str] = Field(
        default=None, description="Forward proxy for partner API requests"
    )

    # Notifications
    notify_enabled: bool = Field(
        default=False, description="Post a message for each newly stored record"
    )
    webhook_url: Optional[str] = Field(
        default=None, description="Webhook receiving notifications"
    )


def get_poller_config(
    settings: Optional[Settings] = None, notify: bool = False
) -> PollerConfig:
    """
    Build the poller configuration for one run.

    Raises:
        ConfigError: If PROXY_URL is unset, or SLACK_HOOK_URL is unset
            while notifications are enabled
    """
    settings = settings or get_settings()

    if not settings.PROXY_URL:
        raise ConfigError("PROXY_URL must be set")
    if notify and not settings.SLACK_HOOK_URL:
        raise ConfigError("SLACK_HOOK_URL must be set when --notify is used")

    return PollerConfig(
        api_timeout=settings.UBP_API_TIMEOUT,
        proxy_url=settings.PROXY_URL,
        notify_enabled=notify,
        webhook_url=settings.SLACK_HOOK_URL,
    )
