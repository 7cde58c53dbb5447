"""Keeper for logins, texts, binary data and card details."""

__version__ = "0.1.0"