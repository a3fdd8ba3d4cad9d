"""Base entity classes for Daily Quest integration."""

from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.helpers.device_registry import DeviceEntryType, DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from . import const
from .coordinator import DailyQuestDataCoordinator


def create_tracker_device_info(config_entry: ConfigEntry) -> DeviceInfo:
    """Create device info grouping every Daily Quest entity of an entry.

    Args:
        config_entry: Config entry for this integration instance

    Returns:
        DeviceInfo dict for the tracker device
    """
    return DeviceInfo(
        identifiers={(const.DOMAIN, f"{config_entry.entry_id}_tracker")},
        name=config_entry.title,
        manufacturer=const.DAILYQUEST_TITLE,
        model="Habit Tracker",
        entry_type=DeviceEntryType.SERVICE,
    )


class DailyQuestCoordinatorEntity(CoordinatorEntity[DailyQuestDataCoordinator]):
    """Base entity class for Daily Quest sensors with typed coordinator access."""

    _attr_has_entity_name = True

    def __init__(
        self,
        coordinator: DailyQuestDataCoordinator,
        entry: ConfigEntry,
        unique_id_suffix: str,
    ) -> None:
        """Initialize the entity.

        Args:
            coordinator: DailyQuestDataCoordinator instance for data access.
            entry: ConfigEntry for this integration instance.
            unique_id_suffix: Suffix appended to the entry id for the unique id.
        """
        super().__init__(coordinator)
        self._attr_unique_id = f"{entry.entry_id}{unique_id_suffix}"
        self._attr_device_info = create_tracker_device_info(entry)

    @property
    def coordinator(self) -> DailyQuestDataCoordinator:
        """Return typed coordinator.

        Uses object.__getattribute__ to access the private _coordinator attribute
        set by the parent CoordinatorEntity class.
        """
        return object.__getattribute__(self, "_coordinator")

    @coordinator.setter
    def coordinator(self, value: DailyQuestDataCoordinator) -> None:
        """Set coordinator with proper typing."""
        object.__setattr__(self, "_coordinator", value)
