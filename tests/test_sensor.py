"""Tests for Daily Quest sensors.

Entities are looked up through the entity registry by unique id so the tests
do not depend on generated entity ids.
"""

# pylint: disable=redefined-outer-name  # Pytest fixtures redefine names
# pylint: disable=unused-argument  # init_integration sets up state only

from homeassistant.const import PERCENTAGE, UnitOfTime
from homeassistant.core import HomeAssistant
from homeassistant.helpers import entity_registry as er
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.dailyquest import const


def _state(hass: HomeAssistant, entry: MockConfigEntry, suffix: str):
    registry = er.async_get(hass)
    entity_id = registry.async_get_entity_id(
        "sensor", const.DOMAIN, f"{entry.entry_id}{suffix}"
    )
    assert entity_id is not None
    state = hass.states.get(entity_id)
    assert state is not None
    return state


async def _update_goal(hass: HomeAssistant, goal_id: str, value) -> None:
    await hass.services.async_call(
        const.DOMAIN,
        const.SERVICE_UPDATE_GOAL,
        {const.FIELD_GOAL_ID: goal_id, const.FIELD_VALUE: value},
        blocking=True,
    )
    await hass.async_block_till_done()


async def test_initial_states(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """A fresh install is level 1 with nothing done."""
    level = _state(hass, init_integration, const.SENSOR_UID_SUFFIX_LEVEL)
    assert level.state == "1"
    assert level.attributes["title"] == "Rookie"
    assert level.attributes["total_xp"] == 0
    assert len(level.attributes[const.COORDINATOR_DATA_ACHIEVEMENTS]) == 6

    progress = _state(hass, init_integration, const.SENSOR_UID_SUFFIX_TODAY_PROGRESS)
    assert float(progress.state) == 0.0
    assert progress.attributes["unit_of_measurement"] == PERCENTAGE
    assert progress.attributes["total_missions"] == const.DEFAULT_MISSIONS_PER_DAY

    streak = _state(hass, init_integration, const.SENSOR_UID_SUFFIX_STREAK)
    assert streak.state == "0"
    assert streak.attributes["unit_of_measurement"] == UnitOfTime.DAYS
    assert len(streak.attributes[const.COORDINATOR_DATA_WEEK]) == 7

    badges = _state(hass, init_integration, const.SENSOR_UID_SUFFIX_BADGES)
    assert badges.state == "0"
    assert badges.attributes[const.ATTR_BADGES_EARNED] == 0


async def test_states_follow_goal_updates(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Completing a goal moves progress, XP and badges."""
    await _update_goal(hass, "water", 8)

    progress = _state(hass, init_integration, const.SENSOR_UID_SUFFIX_TODAY_PROGRESS)
    total_items = len(progress.attributes["goals"]) + const.DEFAULT_MISSIONS_PER_DAY
    assert float(progress.state) == round(100 / total_items, 2)
    assert progress.attributes["goals_completed"] == 1

    level = _state(hass, init_integration, const.SENSOR_UID_SUFFIX_LEVEL)
    assert level.attributes["total_xp"] == 15

    badges = _state(hass, init_integration, const.SENSOR_UID_SUFFIX_BADGES)
    assert badges.state == "1"
    assert badges.attributes[const.ATTR_BADGES_EARNED] == 1
    todays = badges.attributes[const.COORDINATOR_DATA_TODAYS_BADGES]
    assert todays[0]["goal_id"] == "water"


async def test_level_up_is_reported(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Enough XP raises the level sensor."""
    coordinator = hass.data[const.DOMAIN][init_integration.entry_id][
        const.COORDINATOR
    ]
    coordinator.tracker.grant_xp(210, "Test bonus")
    coordinator.async_publish()
    await hass.async_block_till_done()

    level = _state(hass, init_integration, const.SENSOR_UID_SUFFIX_LEVEL)
    assert level.state == "3"
    assert level.attributes["title"] == "Scout"


async def test_sensors_share_one_device(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """All sensors belong to the tracker device of the entry."""
    registry = er.async_get(hass)
    entries = er.async_entries_for_config_entry(registry, init_integration.entry_id)
    assert len(entries) == 4
    assert len({entry.device_id for entry in entries}) == 1
