"""Exceptions raised along the notify pipeline.

Each exception carries the process exit code the CLI maps it to.
"""

from __future__ import annotations

import httpx


class NotifierError(Exception):
    exit_code: int = 1


class UsageError(NotifierError):
    """Caller mistake: missing flags, missing or malformed webhook URL."""

    exit_code = 2


class DeliveryError(NotifierError):
    """The webhook request could not be sent at all."""


class DeliveryRejected(DeliveryError):
    """The webhook answered with a status above 299."""

    def __init__(self, response: httpx.Response) -> None:
        super().__init__(f"webhook responded with HTTP {response.status_code}")
        self.response = response
