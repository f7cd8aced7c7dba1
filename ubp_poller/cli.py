"""
Command-line entry point.

Usage:
    ubp-poller <database> [--notify]

Runs one polling pass over every account in the store and exits. Any
error aborts the run with exit status 1.
"""

import argparse
import asyncio
import sys
from typing import Optional

import structlog

from ubp_poller.core.config import Settings, get_settings
from ubp_poller.core.errors import ConfigError, PollerError, RemoteError
from ubp_poller.core.logging import configure_logging
from ubp_poller.db.base import create_engine, create_session_factory
from ubp_poller.db.init import sanitize_db_url
from ubp_poller.notifications.slack import SlackNotifier
from ubp_poller.transactions.clients.unionbank import UnionBankClient
from ubp_poller.transactions.config import PollerConfig, get_poller_config
from ubp_poller.transactions.poller import TransactionPoller

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ubp-poller",
        description="Store new UnionBank transactions and optionally post them to Slack.",
    )
    parser.add_argument(
        "database", help="SQLite file path or SQLAlchemy async database URL"
    )
    parser.add_argument(
        "--notify",
        action="store_true",
        help="Post a message to SLACK_HOOK_URL for each newly stored transaction",
    )
    return parser


def print_summary(result: dict) -> None:
    """Print the run summary returned by the poller."""
    print("\nPoll completed!")
    print(f"Run ID: {result['run_id']}")
    print(f"Status: {result['status']}")
    print(f"Accounts: {result['accounts_processed']}/{result['accounts_total']}")
    print(f"Fetched: {result['transactions_fetched']}")
    print(f"New: {result['transactions_new']}")
    print(f"Duplicates: {result['transactions_duplicate']}")
    print(f"Notified: {result['notifications_sent']}")
    print(f"Duration: {result['duration_seconds']:.2f}s")


async def run(database: str, config: PollerConfig) -> dict:
    """Run one polling pass with a fresh engine and HTTP client."""
    notifier = None
    if config.notify_enabled:
        if not config.webhook_url:
            raise ConfigError("Notifications are enabled but no webhook URL is set")
        notifier = SlackNotifier(config.webhook_url)

    logger.info("poll.database", url=sanitize_db_url(database))

    engine = create_engine(database)
    try:
        async with UnionBankClient.open(config) as client:
            poller = TransactionPoller(
                client=client,
                session_factory=create_session_factory(engine),
                notifier=notifier,
            )
            return await poller.poll_once()
    finally:
        await engine.dispose()


def main(argv: Optional[list[str]] = None, settings: Optional[Settings] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    settings = settings or get_settings()
    configure_logging(settings.ENV, debug=settings.DEBUG)

    try:
        config = get_poller_config(settings, notify=args.notify)
        result = asyncio.run(run(args.database, config))
        print_summary(result)
        return 0
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except RemoteError as e:
        if e.body:
            print(e.body)
        logger.exception("cli_error", error_type=type(e).__name__)
        return 1
    except PollerError as e:
        logger.exception("cli_error", error_type=type(e).__name__)
        return 1


if __name__ == "__main__":
    sys.exit(main())
