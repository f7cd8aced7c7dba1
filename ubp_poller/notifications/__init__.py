from .formatter import format_message
from .slack import SlackNotifier

__all__ = ["format_message", "SlackNotifier"]
