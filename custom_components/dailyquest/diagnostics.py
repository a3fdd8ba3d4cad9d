"""Diagnostics support for Daily Quest integration.

Provides a data export for troubleshooting and backup/restore. The diagnostics
JSON returns the live document in the same shape as the dailyquest_data file,
so it can be fed back through the import_data service.
"""

from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from . import const
from .coordinator import DailyQuestDataCoordinator


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant, entry: ConfigEntry
) -> dict[str, Any]:
    """Return diagnostics for a config entry.

    Returns the tracker's document directly - no transformation needed.
    """
    coordinator: DailyQuestDataCoordinator = hass.data[const.DOMAIN][entry.entry_id][
        const.COORDINATOR
    ]

    return dict(coordinator.tracker.data)
