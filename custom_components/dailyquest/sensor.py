# File: sensor.py
"""Sensors for the Daily Quest integration.

Each sensor is a read-only projection of the coordinator data; all changes go
through the services.

Sensors Defined in This File (4):
01. DailyQuestLevelSensor
02. DailyQuestTodayProgressSensor
03. DailyQuestStreakSensor
04. DailyQuestBadgesSensor
"""

from typing import Any

from homeassistant.components.sensor import SensorEntity, SensorStateClass
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import PERCENTAGE, UnitOfTime
from homeassistant.core import HomeAssistant

from . import const
from .coordinator import DailyQuestDataCoordinator
from .entity import DailyQuestCoordinatorEntity
from .utils.math_utils import calculate_percentage


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities
):
    """Set up sensors for Daily Quest integration."""
    data = hass.data[const.DOMAIN][entry.entry_id]
    coordinator: DailyQuestDataCoordinator = data[const.COORDINATOR]

    async_add_entities(
        [
            DailyQuestLevelSensor(coordinator, entry),
            DailyQuestTodayProgressSensor(coordinator, entry),
            DailyQuestStreakSensor(coordinator, entry),
            DailyQuestBadgesSensor(coordinator, entry),
        ]
    )


# ------------------------------------------------------------------------------------------
class DailyQuestLevelSensor(DailyQuestCoordinatorEntity, SensorEntity):
    """Sensor for the current level.

    Exposes title, total XP, progress toward the next level and the
    achievement list in attributes.
    """

    _attr_translation_key = const.TRANS_KEY_SENSOR_LEVEL
    _attr_icon = const.DEFAULT_LEVEL_SENSOR_ICON
    _attr_state_class = SensorStateClass.MEASUREMENT

    def __init__(self, coordinator: DailyQuestDataCoordinator, entry: ConfigEntry):
        """Initialize the sensor."""
        super().__init__(coordinator, entry, const.SENSOR_UID_SUFFIX_LEVEL)

    @property
    def native_value(self) -> int:
        """Return the current level."""
        progression = self.coordinator.data.get(const.COORDINATOR_DATA_PROGRESSION, {})
        return progression.get(const.DATA_PROGRESSION_CURRENT_LEVEL, 1)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Expose the progression view and achievements."""
        progression = self.coordinator.data.get(const.COORDINATOR_DATA_PROGRESSION, {})
        attributes: dict[str, Any] = {
            key: value
            for key, value in progression.items()
            if key != const.DATA_PROGRESSION_CURRENT_LEVEL
        }
        attributes[const.COORDINATOR_DATA_ACHIEVEMENTS] = self.coordinator.data.get(
            const.COORDINATOR_DATA_ACHIEVEMENTS, []
        )
        return attributes


# ------------------------------------------------------------------------------------------
class DailyQuestTodayProgressSensor(DailyQuestCoordinatorEntity, SensorEntity):
    """Sensor for today's completion percentage over goals and missions."""

    _attr_translation_key = const.TRANS_KEY_SENSOR_TODAY_PROGRESS
    _attr_icon = const.DEFAULT_TODAY_PROGRESS_SENSOR_ICON
    _attr_state_class = SensorStateClass.MEASUREMENT
    _attr_native_unit_of_measurement = PERCENTAGE

    def __init__(self, coordinator: DailyQuestDataCoordinator, entry: ConfigEntry):
        """Initialize the sensor."""
        super().__init__(coordinator, entry, const.SENSOR_UID_SUFFIX_TODAY_PROGRESS)

    @property
    def native_value(self) -> float:
        """Return completed items over all items of today, in percent."""
        today = self.coordinator.data.get(const.COORDINATOR_DATA_TODAY, {})
        done = today.get("goals_completed", 0) + today.get("missions_completed", 0)
        total = today.get("total_goals", 0) + today.get("total_missions", 0)
        return calculate_percentage(done, total)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Expose today's goals, missions, mood and perfect-day flags."""
        return dict(self.coordinator.data.get(const.COORDINATOR_DATA_TODAY, {}))


# ------------------------------------------------------------------------------------------
class DailyQuestStreakSensor(DailyQuestCoordinatorEntity, SensorEntity):
    """Sensor for the current perfect-day streak, in days."""

    _attr_translation_key = const.TRANS_KEY_SENSOR_STREAK
    _attr_icon = const.DEFAULT_STREAK_SENSOR_ICON
    _attr_state_class = SensorStateClass.MEASUREMENT
    _attr_native_unit_of_measurement = UnitOfTime.DAYS

    def __init__(self, coordinator: DailyQuestDataCoordinator, entry: ConfigEntry):
        """Initialize the sensor."""
        super().__init__(coordinator, entry, const.SENSOR_UID_SUFFIX_STREAK)

    @property
    def native_value(self) -> int:
        """Return the current streak."""
        stats = self.coordinator.data.get(const.COORDINATOR_DATA_STATISTICS, {})
        return stats.get(const.DATA_STATS_CURRENT_STREAK, 0)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Expose the remaining statistics and the week view."""
        stats = self.coordinator.data.get(const.COORDINATOR_DATA_STATISTICS, {})
        attributes: dict[str, Any] = {
            key: value
            for key, value in stats.items()
            if key != const.DATA_STATS_CURRENT_STREAK
        }
        attributes[const.COORDINATOR_DATA_WEEK] = self.coordinator.data.get(
            const.COORDINATOR_DATA_WEEK, []
        )
        return attributes


# ------------------------------------------------------------------------------------------
class DailyQuestBadgesSensor(DailyQuestCoordinatorEntity, SensorEntity):
    """Sensor for the number of badges earned today.

    Attributes list today's badges and every catalog badge with its lock state.
    """

    _attr_translation_key = const.TRANS_KEY_SENSOR_BADGES
    _attr_icon = const.DEFAULT_BADGES_SENSOR_ICON

    def __init__(self, coordinator: DailyQuestDataCoordinator, entry: ConfigEntry):
        """Initialize the sensor."""
        super().__init__(coordinator, entry, const.SENSOR_UID_SUFFIX_BADGES)

    @property
    def native_value(self) -> int:
        """Return how many badges were earned today."""
        return len(self.coordinator.data.get(const.COORDINATOR_DATA_TODAYS_BADGES, []))

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Expose today's badges and the badge collection."""
        all_badges = self.coordinator.data.get(const.COORDINATOR_DATA_ALL_BADGES, [])
        return {
            const.COORDINATOR_DATA_TODAYS_BADGES: self.coordinator.data.get(
                const.COORDINATOR_DATA_TODAYS_BADGES, []
            ),
            const.ATTR_BADGES_EARNED: sum(1 for badge in all_badges if badge["earned"]),
            const.ATTR_BADGES_TOTAL: len(all_badges),
            const.COORDINATOR_DATA_ALL_BADGES: all_badges,
        }
