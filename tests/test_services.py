"""Tests for Daily Quest services.

Service calls go through Home Assistant with the integration set up on empty
storage; responses are the tracker's result dicts.
"""

# pylint: disable=redefined-outer-name  # Pytest fixtures redefine names
# pylint: disable=unused-argument  # init_integration sets up state only

import json

import pytest
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError, ServiceValidationError
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.dailyquest import const
from custom_components.dailyquest.coordinator import DailyQuestDataCoordinator


def _coordinator(
    hass: HomeAssistant, entry: MockConfigEntry
) -> DailyQuestDataCoordinator:
    return hass.data[const.DOMAIN][entry.entry_id][const.COORDINATOR]


async def _call(hass: HomeAssistant, service: str, data: dict | None = None):
    return await hass.services.async_call(
        const.DOMAIN,
        service,
        data or {},
        blocking=True,
        return_response=True,
    )


# ============================================================================
# Goals
# ============================================================================


async def test_update_goal_clamps_and_rewards(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Setting water far above the target clamps it and pays the bonus."""
    response = await _call(
        hass,
        const.SERVICE_UPDATE_GOAL,
        {const.FIELD_GOAL_ID: "water", const.FIELD_VALUE: 999},
    )

    assert response["value"] == 16
    assert response["exceeded"] is True
    assert response["xp_awarded"] == 20
    coordinator = _coordinator(hass, init_integration)
    assert coordinator.data[const.COORDINATOR_DATA_PROGRESSION]["total_xp"] == 20


async def test_update_goal_checkbox(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Checkbox goals accept booleans."""
    response = await _call(
        hass,
        const.SERVICE_UPDATE_GOAL,
        {const.FIELD_GOAL_ID: "duolingo", const.FIELD_VALUE: True},
    )
    assert response["value"] is True
    assert response["xp_awarded"] == 15


async def test_update_goal_unknown_goal(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Unknown goals are rejected."""
    with pytest.raises(ServiceValidationError):
        await _call(
            hass,
            const.SERVICE_UPDATE_GOAL,
            {const.FIELD_GOAL_ID: "pushups", const.FIELD_VALUE: 10},
        )


async def test_update_goal_non_numeric_counter(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Counter goals refuse non-numeric values."""
    with pytest.raises(ServiceValidationError):
        await _call(
            hass,
            const.SERVICE_UPDATE_GOAL,
            {const.FIELD_GOAL_ID: "water", const.FIELD_VALUE: "lots"},
        )


async def test_adjust_goal(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Deltas accumulate on counter goals."""
    await _call(
        hass,
        const.SERVICE_ADJUST_GOAL,
        {const.FIELD_GOAL_ID: "reading", const.FIELD_DELTA: 20},
    )
    response = await _call(
        hass,
        const.SERVICE_ADJUST_GOAL,
        {const.FIELD_GOAL_ID: "reading", const.FIELD_DELTA: 10},
    )
    assert response["value"] == 30
    assert response["newly_completed"] is True

    with pytest.raises(ServiceValidationError):
        await _call(
            hass,
            const.SERVICE_ADJUST_GOAL,
            {const.FIELD_GOAL_ID: "pushups", const.FIELD_DELTA: 1},
        )


# ============================================================================
# Missions and mood
# ============================================================================


async def test_toggle_mission(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """One of today's missions can be toggled."""
    coordinator = _coordinator(hass, init_integration)
    mission_id = coordinator.data[const.COORDINATOR_DATA_TODAY]["missions"][0]["id"]

    response = await _call(
        hass, const.SERVICE_TOGGLE_MISSION, {const.FIELD_MISSION_ID: mission_id}
    )

    assert response["completed"] is True
    assert response["xp_awarded"] == 10
    assert coordinator.data[const.COORDINATOR_DATA_TODAY]["missions_completed"] == 1


async def test_toggle_unknown_mission(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Missions that are not today's are rejected."""
    with pytest.raises(ServiceValidationError):
        await _call(
            hass, const.SERVICE_TOGGLE_MISSION, {const.FIELD_MISSION_ID: "not_today"}
        )


async def test_set_mood(hass: HomeAssistant, init_integration: MockConfigEntry) -> None:
    """Mood is stored for today; text is optional."""
    response = await _call(hass, const.SERVICE_SET_MOOD, {const.FIELD_EMOJI: "😀"})

    assert response["mood"] == {"emoji": "😀", "text": ""}
    coordinator = _coordinator(hass, init_integration)
    assert coordinator.data[const.COORDINATOR_DATA_TODAY]["mood"]["emoji"] == "😀"


# ============================================================================
# Data maintenance
# ============================================================================


async def test_export_and_import(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """An export can be re-imported after a reset."""
    await _call(
        hass,
        const.SERVICE_UPDATE_GOAL,
        {const.FIELD_GOAL_ID: "water", const.FIELD_VALUE: 8},
    )
    exported = await _call(hass, const.SERVICE_EXPORT_DATA)
    document = json.loads(exported[const.FIELD_DATA])
    assert const.DATA_HISTORY in document

    await hass.services.async_call(
        const.DOMAIN, const.SERVICE_RESET_ALL_DATA, {}, blocking=True
    )
    coordinator = _coordinator(hass, init_integration)
    assert coordinator.data[const.COORDINATOR_DATA_PROGRESSION]["total_xp"] == 0

    await hass.services.async_call(
        const.DOMAIN,
        const.SERVICE_IMPORT_DATA,
        {const.FIELD_DATA: exported[const.FIELD_DATA]},
        blocking=True,
    )
    assert coordinator.data[const.COORDINATOR_DATA_PROGRESSION]["total_xp"] == 15


async def test_import_rejects_garbage(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Invalid documents raise and leave the state untouched."""
    coordinator = _coordinator(hass, init_integration)
    before = coordinator.tracker.data

    with pytest.raises(HomeAssistantError):
        await hass.services.async_call(
            const.DOMAIN,
            const.SERVICE_IMPORT_DATA,
            {const.FIELD_DATA: "{not json"},
            blocking=True,
        )

    assert coordinator.tracker.data == before


async def test_refresh_today(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """A forced date check on the same day changes nothing."""
    coordinator = _coordinator(hass, init_integration)
    response = await _call(hass, const.SERVICE_REFRESH_TODAY)
    assert response == {"date_changed": False, "today": coordinator.tracker.today_key}


async def test_get_history(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """History lists today's record with its totals and matches the entities."""
    coordinator = _coordinator(hass, init_integration)
    await _call(
        hass,
        const.SERVICE_UPDATE_GOAL,
        {const.FIELD_GOAL_ID: "water", const.FIELD_VALUE: 8},
    )

    response = await _call(hass, const.SERVICE_GET_HISTORY)

    rows = response[const.FIELD_HISTORY]
    assert len(rows) == 1
    assert rows[0]["date"] == coordinator.tracker.today_key
    assert rows[0]["goals_completed"] == 1
    assert rows[0]["total_goals"] == len(coordinator.tracker.get_today_view()["goals"])
    assert rows == coordinator.data[const.COORDINATOR_DATA_HISTORY]


async def test_services_removed_on_unload(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Unloading the entry unregisters every service."""
    assert hass.services.has_service(const.DOMAIN, const.SERVICE_UPDATE_GOAL)

    assert await hass.config_entries.async_unload(init_integration.entry_id)
    await hass.async_block_till_done()

    for service in (
        const.SERVICE_UPDATE_GOAL,
        const.SERVICE_ADJUST_GOAL,
        const.SERVICE_TOGGLE_MISSION,
        const.SERVICE_SET_MOOD,
        const.SERVICE_EXPORT_DATA,
        const.SERVICE_IMPORT_DATA,
        const.SERVICE_RESET_ALL_DATA,
        const.SERVICE_REFRESH_TODAY,
        const.SERVICE_GET_HISTORY,
    ):
        assert not hass.services.has_service(const.DOMAIN, service)
