"""UnionBank transaction poller."""

__version__ = "0.1.0"
