"""
Tests for services.smart_plug

Test Coverage:
- format_duration(): hours/minutes, minutes only, seconds only, zero/negative
- StubSmartPlugProvider: fixed status, accepts power commands
"""
import pytest

from coffee_helper.services.smart_plug import StubSmartPlugProvider, format_duration


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0s"),
        (-5, "0s"),
        (42, "42s"),
        (60, "1m"),
        (3599, "59m"),
        (3600, "1h 0m"),
        (3725, "1h 2m"),
        (90061, "25h 1m"),
    ],
)
def test_format_duration(seconds, expected):
    assert format_duration(seconds) == expected


@pytest.mark.anyio
async def test_stub_reports_off_for_an_hour():
    plug = StubSmartPlugProvider()

    status = await plug.get_status("kitchen-plug")

    assert status.is_on is False
    assert status.on_time_seconds == 3600
    assert format_duration(status.on_time_seconds) == "1h 0m"


@pytest.mark.anyio
async def test_stub_accepts_power_commands():
    plug = StubSmartPlugProvider()

    assert await plug.set_power("kitchen-plug", True) is None
