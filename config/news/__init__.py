"""BBC-style news catalog served over a small JSON API."""

__version__ = "1.0.0"
