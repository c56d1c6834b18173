"""Input-mode detection and required-field checks for the notify command."""

from __future__ import annotations

import time
from dataclasses import dataclass

import httpx

from rocketchat_notifier.errors import UsageError
from rocketchat_notifier.models import Event, Target

WEBHOOK_MISSING = "$ROCKETCHAT_WEBHOOK_URL missing"
SERVICE_FIELDS_MISSING = "-service.* is given, missing some of: -host.name, -service.name, -service.state"
HOST_FIELDS_MISSING = "-host.* is given, missing some of: -host.name, -host.state"
NOTHING_GIVEN = "Missing either -host.name and -host.state or -host.name, -service.name and -service.state"


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class RawInputs:
    """Flag values exactly as received from the command line."""

    icinga_timet: int = 0
    host_name: str = ""
    host_display_name: str = ""
    host_action_url: str = ""
    host_state: str = ""
    host_output: str = ""
    service_name: str = ""
    service_display_name: str = ""
    service_action_url: str = ""
    service_state: str = ""
    service_output: str = ""

    @property
    def any_service_field(self) -> bool:
        return not all(
            is_blank(v)
            for v in (
                self.service_name,
                self.service_display_name,
                self.service_action_url,
                self.service_state,
                self.service_output,
            )
        )

    @property
    def any_host_field(self) -> bool:
        return not all(
            is_blank(v)
            for v in (
                self.host_name,
                self.host_display_name,
                self.host_action_url,
                self.host_state,
                self.host_output,
            )
        )


def validate_inputs(raw: RawInputs, now: int | None = None) -> tuple[Event, Target]:
    """Pick host or service mode, enforce its required flags and fill defaults.

    Any service flag selects service mode, even when host flags are given too.

    Raises:
        UsageError: required flags for the selected mode are missing, or no
            flags were given at all.
    """
    if raw.any_service_field:
        if is_blank(raw.host_name) or is_blank(raw.service_name) or is_blank(raw.service_state):
            raise UsageError(SERVICE_FIELDS_MISSING)
        reports_service = True
        state, output = raw.service_state, raw.service_output
    elif raw.any_host_field:
        if is_blank(raw.host_name) or is_blank(raw.host_state):
            raise UsageError(HOST_FIELDS_MISSING)
        reports_service = False
        state, output = raw.host_state, raw.host_output
    else:
        raise UsageError(NOTHING_GIVEN)

    timestamp = raw.icinga_timet
    if timestamp == 0:
        timestamp = int(time.time()) if now is None else now

    host_display_name = raw.host_name if is_blank(raw.host_display_name) else raw.host_display_name

    if reports_service:
        service_display_name = (
            raw.service_name if is_blank(raw.service_display_name) else raw.service_display_name
        )
        target = Target(
            host_name=raw.host_name,
            host_display_name=host_display_name,
            host_action_url=raw.host_action_url,
            service_name=raw.service_name,
            service_display_name=service_display_name,
            service_action_url=raw.service_action_url,
        )
    else:
        target = Target(
            host_name=raw.host_name,
            host_display_name=host_display_name,
            host_action_url=raw.host_action_url,
        )

    event = Event(timestamp=timestamp, reports_service=reports_service, state=state, output=output)
    return event, target


def require_webhook(raw_url: str | None) -> None:
    if is_blank(raw_url):
        raise UsageError(WEBHOOK_MISSING)


def parse_webhook_url(raw_url: str | None) -> httpx.URL:
    """Parse the webhook URL, rejecting anything a POST could not be sent to."""
    require_webhook(raw_url)
    try:
        url = httpx.URL(raw_url.strip())
    except httpx.InvalidURL as exc:
        raise UsageError(str(exc)) from exc

    if url.scheme not in ("http", "https"):
        raise UsageError(f"unsupported webhook URL scheme: {url.scheme or '(none)'!r}")
    if not url.host:
        raise UsageError(f"webhook URL has no host: {raw_url.strip()}")
    return url
