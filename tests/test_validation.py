import httpx
import pytest

from rocketchat_notifier.errors import UsageError
from rocketchat_notifier.validation import (
    HOST_FIELDS_MISSING,
    NOTHING_GIVEN,
    SERVICE_FIELDS_MISSING,
    WEBHOOK_MISSING,
    RawInputs,
    is_blank,
    parse_webhook_url,
    validate_inputs,
)


@pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
def test_is_blank(value) -> None:
    assert is_blank(value)


def test_is_blank_false_for_text() -> None:
    assert not is_blank(" h1 ")


def test_host_mode() -> None:
    event, target = validate_inputs(
        RawInputs(icinga_timet=1700000000, host_name="h1", host_state="DOWN", host_output="PING CRITICAL")
    )

    assert not event.reports_service
    assert event.state == "DOWN"
    assert event.output == "PING CRITICAL"
    assert event.timestamp == 1700000000
    assert target.host_name == "h1"
    assert target.service_name == ""


def test_service_mode_uses_service_state_and_output() -> None:
    event, target = validate_inputs(
        RawInputs(
            host_name="h1",
            host_state="UP",
            host_output="host fine",
            service_name="disk",
            service_state="WARNING",
            service_output="DISK WARNING - 91% used",
        )
    )

    assert event.reports_service
    assert event.state == "WARNING"
    assert event.output == "DISK WARNING - 91% used"
    assert target.service_name == "disk"


def test_blank_display_names_default_to_names() -> None:
    _, target = validate_inputs(
        RawInputs(host_name="h1", host_display_name="  ", service_name="s1", service_state="OK")
    )

    assert target.host_display_name == "h1"
    assert target.service_display_name == "s1"


def test_display_names_kept_when_given() -> None:
    _, target = validate_inputs(
        RawInputs(
            host_name="h1",
            host_display_name="Web frontend",
            service_name="s1",
            service_display_name="HTTPS",
            service_state="OK",
        )
    )

    assert target.host_display_name == "Web frontend"
    assert target.service_display_name == "HTTPS"


def test_zero_timestamp_means_now() -> None:
    event, _ = validate_inputs(RawInputs(host_name="h1", host_state="UP"), now=1234)
    assert event.timestamp == 1234


def test_nothing_given() -> None:
    with pytest.raises(UsageError, match="Missing either") as exc_info:
        validate_inputs(RawInputs())
    assert str(exc_info.value) == NOTHING_GIVEN
    assert exc_info.value.exit_code == 2


def test_host_mode_requires_state() -> None:
    with pytest.raises(UsageError) as exc_info:
        validate_inputs(RawInputs(host_name="h1"))
    assert str(exc_info.value) == HOST_FIELDS_MISSING


def test_host_mode_requires_name() -> None:
    with pytest.raises(UsageError) as exc_info:
        validate_inputs(RawInputs(host_display_name="Web", host_state="UP"))
    assert str(exc_info.value) == HOST_FIELDS_MISSING


@pytest.mark.parametrize(
    "raw",
    [
        RawInputs(service_name="s1"),
        RawInputs(host_name="h1", service_name="s1"),
        RawInputs(host_name="h1", service_state="CRITICAL"),
        RawInputs(host_name="h1", host_state="UP", service_output="only output"),
    ],
)
def test_any_service_field_forces_service_mode(raw) -> None:
    with pytest.raises(UsageError) as exc_info:
        validate_inputs(raw)
    assert str(exc_info.value) == SERVICE_FIELDS_MISSING


def test_parse_webhook_url() -> None:
    url = parse_webhook_url(" https://chat.example.com/hooks/abc/def ")
    assert isinstance(url, httpx.URL)
    assert url.host == "chat.example.com"
    assert url.path == "/hooks/abc/def"


@pytest.mark.parametrize("raw", ["", "  ", None])
def test_parse_webhook_url_missing(raw) -> None:
    with pytest.raises(UsageError) as exc_info:
        parse_webhook_url(raw)
    assert str(exc_info.value) == WEBHOOK_MISSING


@pytest.mark.parametrize("raw", ["chat.example.com/hooks", "ftp://chat.example.com/hooks", "https://"])
def test_parse_webhook_url_malformed(raw) -> None:
    with pytest.raises(UsageError):
        parse_webhook_url(raw)
