"""Plugin logic for a group chat bot: modes, replies, lookups, stories and drift bottles."""

__version__ = "0.1.0"