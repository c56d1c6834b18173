"""Icinga notification command posting check results to Rocket.Chat.

Flags mirror the Icinga runtime macros they are fed from, e.g.::

    rocketchat-notifier -icinga.timet='$icinga.timet$' \
        -host.name='$host.name$' -host.state='$host.state$' \
        -service.name='$service.name$' -service.state='$service.state$'
"""

from __future__ import annotations

import asyncio

import typer

from rocketchat_notifier.errors import DeliveryError, DeliveryRejected, NotifierError, UsageError
from rocketchat_notifier.formatter import format_message, resolve_hostname
from rocketchat_notifier.logging import configure, get_logger
from rocketchat_notifier.notifications import RocketChatNotifier, render_response
from rocketchat_notifier.settings import get_settings
from rocketchat_notifier.validation import WEBHOOK_MISSING, RawInputs, parse_webhook_url, validate_inputs

logger = get_logger(__name__)

app = typer.Typer(add_completion=False)


@app.command()
def notify(
    icinga_timet: int = typer.Option(0, "-icinga.timet", "--icinga.timet", help="$icinga.timet$ (0 = now)"),
    host_name: str = typer.Option("", "-host.name", "--host.name", help="$host.name$"),
    host_display_name: str = typer.Option("", "-host.display_name", "--host.display_name", help="$host.display_name$"),
    host_action_url: str = typer.Option("", "-host.action_url", "--host.action_url", help="$host.action_url$"),
    host_state: str = typer.Option("", "-host.state", "--host.state", help="$host.state$"),
    host_output: str = typer.Option("", "-host.output", "--host.output", help="$host.output$"),
    service_name: str = typer.Option("", "-service.name", "--service.name", help="$service.name$"),
    service_display_name: str = typer.Option(
        "", "-service.display_name", "--service.display_name", help="$service.display_name$"
    ),
    service_action_url: str = typer.Option(
        "", "-service.action_url", "--service.action_url", help="$service.action_url$"
    ),
    service_state: str = typer.Option("", "-service.state", "--service.state", help="$service.state$"),
    service_output: str = typer.Option("", "-service.output", "--service.output", help="$service.output$"),
) -> None:
    """Send one host or service notification to $ROCKETCHAT_WEBHOOK_URL."""
    settings = get_settings()
    configure(settings.log_level)

    raw = RawInputs(
        icinga_timet=icinga_timet,
        host_name=host_name,
        host_display_name=host_display_name,
        host_action_url=host_action_url,
        host_state=host_state,
        host_output=host_output,
        service_name=service_name,
        service_display_name=service_display_name,
        service_action_url=service_action_url,
        service_state=service_state,
        service_output=service_output,
    )

    try:
        if not settings.has_webhook:
            raise UsageError(WEBHOOK_MISSING)
        event, target = validate_inputs(raw)
        webhook_url = parse_webhook_url(settings.webhook_url)
    except NotifierError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(exc.exit_code)

    logger.debug(
        "inputs validated",
        mode="service" if event.reports_service else "host",
        state=event.state,
        category=event.category,
    )

    exit_code = 0
    hostname, hostname_error = resolve_hostname()
    if hostname_error is not None:
        typer.echo(str(hostname_error), err=True)
        exit_code = 1

    text = format_message(event, target, hostname)
    notifier = RocketChatNotifier(webhook_url=webhook_url)

    try:
        asyncio.run(notifier.send(text))
    except DeliveryRejected as exc:
        typer.echo(render_response(exc.response), err=True)
        raise typer.Exit(exc.exit_code)
    except DeliveryError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(exc.exit_code)

    logger.info("notification delivered", host=target.host_name, degraded=bool(exit_code))
    raise typer.Exit(exit_code)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
