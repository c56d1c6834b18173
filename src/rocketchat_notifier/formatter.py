"""Rocket.Chat message text for a monitoring event.

The message uses Rocket.Chat markdown: ``*bold*``, ``_italic_``,
``[text](url)`` links and fenced code blocks for the plugin output.
"""

from __future__ import annotations

import socket
from datetime import datetime

from rocketchat_notifier.models import Event, Target
from rocketchat_notifier.validation import is_blank

UNKNOWN_HOSTNAME = "(unknown)"


def resolve_hostname() -> tuple[str, OSError | None]:
    """Name of the machine running the notifier, or ``(unknown)`` and the lookup error."""
    try:
        return socket.gethostname(), None
    except OSError as exc:
        return UNKNOWN_HOSTNAME, exc


def link_or_italic(text: str, url: str) -> str:
    if is_blank(url):
        return f"_{text}_"
    return f"[{text}]({url})"


def format_timestamp(timestamp: int) -> str:
    # e.g. 2024-05-01 13:37:00 +0200 CEST
    try:
        return datetime.fromtimestamp(timestamp).astimezone().strftime("%Y-%m-%d %H:%M:%S %z %Z")
    except (OverflowError, OSError, ValueError):
        # outside the datetime range
        return f"{timestamp} (epoch seconds)"


def format_message(event: Event, target: Target, hostname: str) -> str:
    """Render the chat message for ``event`` on ``target``.

    Args:
        event: validated check result
        target: validated host (and service) with display names filled in
        hostname: name of the machine sending the notification

    Returns:
        The message text, ending with the plugin output in a code block.
    """
    category = event.category
    icon = category.icon
    state = f"*{event.state.lower()}*{category.punctuation}"
    host = link_or_italic(target.host_display_name, target.host_action_url)
    when = format_timestamp(event.timestamp)

    if event.reports_service:
        service = link_or_italic(target.service_display_name, target.service_action_url)
        lines = [
            f":{icon}: *Service monitoring on {hostname}* :{icon}:",
            "",
            f"{service} on {host} is {state}",
            "",
            f"When: {when}",
            f"Host: {target.host_name}",
            f"Service: {target.service_name}",
        ]
    else:
        lines = [
            f":{icon}: *Host monitoring on {hostname}* :{icon}:",
            "",
            f"{host} is {state}",
            "",
            f"When: {when}",
            f"Host: {target.host_name}",
        ]

    lines += ["Info:", "", "```", event.output, "```"]
    return "\n".join(lines)
