"""Icinga → Rocket.Chat incoming-webhook notifier."""

__version__ = "0.1.0"
