"""Render a stored transaction as a one-line chat message."""

import re
from datetime import datetime

from ubp_poller.core.errors import NotifyError
from ubp_poller.db.models import Account
from ubp_poller.transactions.models import TransactionRecord

CREDIT_ICON = ":green_heart:"
DEBIT_ICON = ":heart:"

POSTED_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"
_POSTED_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}")
_AMOUNT_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def format_amount(amount: str) -> str:
    """
    Format a decimal string with thousands separators and two decimals.

    >>> format_amount("1234.5")
    '1,234.50'
    """
    if not _AMOUNT_PATTERN.fullmatch(amount or ""):
        raise NotifyError(f"Invalid amount: {amount!r}")
    return f"{float(amount):,.2f}"


def format_posted_date(posted_date: str) -> str:
    """
    Re-render a posted date as month/day and 24h time, without zero padding.

    >>> format_posted_date("2024-03-07T14:05:00.000")
    '3/7 14:05'
    """
    if not _POSTED_DATE_PATTERN.fullmatch(posted_date or ""):
        raise NotifyError(f"Invalid posted date: {posted_date!r}")
    try:
        parsed = datetime.strptime(posted_date, POSTED_DATE_FORMAT)
    except ValueError as e:
        raise NotifyError(f"Invalid posted date: {posted_date!r}") from e
    return f"{parsed.month}/{parsed.day} {parsed:%H:%M}"


def format_message(account: Account, record: TransactionRecord) -> str:
    """Build the notification text for a newly stored record."""
    if record.is_credit:
        icon, label = CREDIT_ICON, "Credit"
    else:
        icon, label = DEBIT_ICON, "Debit"

    text = (
        f"{icon} New Unionbank {account.name} {label} {record.tran_id}: "
        f"{format_amount(record.amount)} {record.currency} "
        f"{record.tran_description} {record.remarks} {record.remarks2} "
        f"on {format_posted_date(record.posted_date)}"
    )
    return " ".join(text.split())
