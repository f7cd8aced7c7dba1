"""
Poller exception hierarchy.

Every component raises one of these; none of them is recovered locally.
The CLI is the single place that turns them into an exit status.
"""

from typing import Optional


class PollerError(Exception):
    """Base exception for all poller failures."""

    pass


class ConfigError(PollerError):
    """Raised when required runtime configuration is missing or invalid."""

    pass


class StoreError(PollerError):
    """Raised when loading accounts from the store fails."""

    pass


class PersistError(StoreError):
    """Raised when the existence check or insert of a record fails."""

    pass


class AuthError(PollerError):
    """Raised when the password-grant token exchange fails."""

    pass


class RemoteError(PollerError):
    """Raised when the transactions endpoint fails or answers non-200."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: str = "",
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DecodeError(PollerError):
    """Raised when the partner returns a body that cannot be decoded."""

    pass


class NotifyError(PollerError):
    """Raised when a notification cannot be formatted or delivered."""

    pass
