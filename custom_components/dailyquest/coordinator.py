# File: coordinator.py
"""Coordinator for the Daily Quest integration.

Owns the DailyQuestTracker for one config entry, feeds it Home Assistant's
clock, hands its snapshots to the storage manager and publishes read-only
projections to entities. The periodic refresh is the date-rollover check.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed
from homeassistant.util import dt as dt_util

from . import const
from .storage_manager import DailyQuestStorageManager
from .tracker import DailyQuestTracker


class DailyQuestDataCoordinator(DataUpdateCoordinator[dict[str, Any]]):
    """Coordinator for Daily Quest.

    ``data`` holds the projections entities read (today, progression,
    statistics, badges, week, achievements). Service handlers mutate through
    ``tracker`` and then call ``async_publish``.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        config_entry: ConfigEntry,
        storage_manager: DailyQuestStorageManager,
    ) -> None:
        """Initialize the DailyQuestDataCoordinator."""
        update_interval_minutes = config_entry.options.get(
            const.CONF_UPDATE_INTERVAL, const.DEFAULT_UPDATE_INTERVAL
        )

        super().__init__(
            hass,
            const.LOGGER,
            name=f"{const.DOMAIN}{const.COORDINATOR_SUFFIX}",
            update_interval=timedelta(minutes=update_interval_minutes),
        )
        self.config_entry = config_entry
        self.storage_manager = storage_manager
        self.tracker = DailyQuestTracker(
            now_fn=dt_util.utcnow, save_fn=self._persist
        )

    def _persist(self, snapshot: dict[str, Any]) -> None:
        """Save callback handed to the tracker."""
        self.storage_manager.schedule_save(snapshot)

    def _build_data(self) -> dict[str, Any]:
        """Projections published to entities."""
        return {
            const.COORDINATOR_DATA_TODAY: self.tracker.get_today_view(),
            const.COORDINATOR_DATA_PROGRESSION: self.tracker.get_progression_view(),
            const.COORDINATOR_DATA_STATISTICS: self.tracker.get_statistics(),
            const.COORDINATOR_DATA_TODAYS_BADGES: self.tracker.get_todays_badges(),
            const.COORDINATOR_DATA_WEEK: self.tracker.get_week_view(),
            const.COORDINATOR_DATA_ACHIEVEMENTS: self.tracker.get_achievements_view(),
            const.COORDINATOR_DATA_ALL_BADGES: (
                self.tracker.get_all_badges_with_lock_state()
            ),
            const.COORDINATOR_DATA_HISTORY: self.tracker.get_history_view(),
        }

    async def async_config_entry_first_refresh(self) -> None:
        """Load the stored document into the tracker, then refresh."""
        stored = (
            self.storage_manager.data if self.storage_manager.has_stored_data else None
        )
        self.tracker.on_app_start(stored)
        await super().async_config_entry_first_refresh()

    async def _async_update_data(self) -> dict[str, Any]:
        """Periodic update: date-rollover check."""
        try:
            result = self.tracker.ensure_today()
            if result["date_changed"]:
                const.LOGGER.debug(
                    "DEBUG: Coordinator observed new day %s", result["today"]
                )
            return self._build_data()
        except Exception as err:  # pylint: disable=broad-exception-caught
            raise UpdateFailed(f"Error updating Daily Quest data: {err}") from err

    def async_publish(self) -> None:
        """Push fresh projections to entities after a mutation."""
        self.async_set_updated_data(self._build_data())
