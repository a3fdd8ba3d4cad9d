"""Shared fixtures for Daily Quest tests."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any
from unittest.mock import patch
from zoneinfo import ZoneInfo

import pytest
from homeassistant.core import HomeAssistant
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.dailyquest.const import DAILYQUEST_TITLE, DOMAIN
from custom_components.dailyquest.tracker import DailyQuestTracker
from custom_components.dailyquest.utils import dt_utils

# pylint: disable=invalid-name
pytest_plugins = "pytest_homeassistant_custom_component"
# pylint: enable=invalid-name


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(enable_custom_integrations: Any) -> Any:
    """Enable custom integrations in tests."""
    # pylint: disable=unused-argument
    yield


class FakeClock:
    """Settable clock returning an aware UTC datetime."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: Any) -> None:
        """Move the clock forward by a timedelta."""
        self.now += timedelta(**kwargs)


@pytest.fixture
def utc_timezone() -> Any:
    """Run with UTC as the local zone, restoring the previous zone afterwards."""
    previous = dt_utils.get_default_timezone()
    dt_utils.set_default_timezone(ZoneInfo("UTC"))
    yield
    dt_utils.set_default_timezone(previous)


@pytest.fixture
def clock(utc_timezone: Any) -> FakeClock:  # pylint: disable=redefined-outer-name
    """Clock frozen at 2026-10-19 12:00 UTC."""
    # pylint: disable=unused-argument
    return FakeClock(datetime(2026, 10, 19, 12, 0, tzinfo=UTC))


@pytest.fixture
def saved_snapshots() -> list[dict[str, Any]]:
    """Snapshots handed to the tracker's save callback."""
    return []


@pytest.fixture
def tracker(
    clock: FakeClock,  # pylint: disable=redefined-outer-name
    saved_snapshots: list[dict[str, Any]],  # pylint: disable=redefined-outer-name
) -> DailyQuestTracker:
    """Started tracker on an empty state."""
    instance = DailyQuestTracker(now_fn=clock, save_fn=saved_snapshots.append)
    instance.on_app_start(None)
    return instance


@pytest.fixture
def complete_today() -> Callable[[DailyQuestTracker], None]:
    """Complete every goal and mission of today."""

    def _complete(instance: DailyQuestTracker) -> None:
        instance.update_goal("water", 8)
        instance.update_goal("stretch", 15)
        instance.update_goal("duolingo", True)
        instance.update_goal("reading", 30)
        for mission in instance.get_today_view()["missions"]:
            instance.toggle_mission(mission["id"])

    return _complete


@pytest.fixture
def mock_config_entry() -> MockConfigEntry:
    """Return a mock config entry."""
    return MockConfigEntry(
        domain=DOMAIN,
        title=DAILYQUEST_TITLE,
        data={},
        options={},
        entry_id="test_entry_id",
        unique_id="test_unique_id",
    )


@pytest.fixture
async def init_integration(
    hass: HomeAssistant,
    mock_config_entry: MockConfigEntry,  # pylint: disable=redefined-outer-name
) -> MockConfigEntry:
    """Set up the Daily Quest integration for testing with empty storage."""
    mock_config_entry.add_to_hass(hass)

    # Mock the Store's async_load to start from an empty document
    with patch(
        "homeassistant.helpers.storage.Store.async_load",
        return_value=None,
    ):
        assert await hass.config_entries.async_setup(mock_config_entry.entry_id)
        await hass.async_block_till_done()

    return mock_config_entry
