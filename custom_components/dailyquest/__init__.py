# File: __init__.py
"""Initialization file for the Daily Quest integration.

Handles setting up the integration, including loading configuration entries,
initializing data storage, and preparing the coordinator for data handling.

Key Features:
- Config entry setup and unload support.
- Coordinator initialization; its periodic refresh rolls the day over.
- Storage management for persistent data handling.
"""

from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryNotReady
from homeassistant.util import dt as dt_util

from . import const
from .catalog import validate_catalog
from .coordinator import DailyQuestDataCoordinator
from .services import async_setup_services, async_unload_services
from .storage_manager import DailyQuestStorageManager
from .utils import dt_utils


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up the integration from a config entry."""
    const.LOGGER.info("INFO: Starting setup for Daily Quest entry: %s", entry.entry_id)

    catalog_errors = validate_catalog()
    if catalog_errors:
        for key, message in catalog_errors.items():
            const.LOGGER.error("ERROR: Catalog check failed (%s): %s", key, message)
        return False

    # Set the home assistant configured timezone for date keys
    # Must be done before the tracker computes "today"
    dt_utils.set_default_timezone(dt_util.get_time_zone(hass.config.time_zone))

    # Initialize the storage manager to handle persistent data.
    storage_manager = DailyQuestStorageManager(hass, const.STORAGE_KEY)
    await storage_manager.async_initialize()

    # Create the data coordinator for managing updates and synchronization.
    coordinator = DailyQuestDataCoordinator(hass, entry, storage_manager)

    try:
        # Load the stored document into the tracker and publish the first data.
        await coordinator.async_config_entry_first_refresh()
    except ConfigEntryNotReady as e:
        const.LOGGER.error("ERROR: Failed to refresh coordinator data: %s", e)
        raise ConfigEntryNotReady from e

    # Store the coordinator and data manager in hass.data.
    hass.data.setdefault(const.DOMAIN, {})[entry.entry_id] = {
        const.COORDINATOR: coordinator,
        const.STORAGE_MANAGER: storage_manager,
    }

    # Set up services required by the integration.
    async_setup_services(hass)

    # Forward the setup to supported platforms.
    await hass.config_entries.async_forward_entry_setups(entry, const.PLATFORMS)

    const.LOGGER.info("INFO: Daily Quest setup complete for entry: %s", entry.entry_id)
    return True


async def async_unload_entry(hass, entry):
    """Unload a config entry."""
    const.LOGGER.info("INFO: Unloading Daily Quest entry: %s", entry.entry_id)

    # Unload platforms
    unload_ok = await hass.config_entries.async_unload_platforms(entry, const.PLATFORMS)

    if unload_ok:
        entry_data = hass.data[const.DOMAIN].pop(entry.entry_id)

        # Flush any pending delayed write
        storage_manager: DailyQuestStorageManager = entry_data[const.STORAGE_MANAGER]
        await storage_manager.async_save()

        # Await service unloading
        await async_unload_services(hass)

    return unload_ok


async def async_remove_entry(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Handle removal of a config entry."""
    const.LOGGER.info("INFO: Removing Daily Quest entry: %s", entry.entry_id)

    storage_manager = DailyQuestStorageManager(hass, const.STORAGE_KEY)
    await storage_manager.async_delete_storage()

    const.LOGGER.info("INFO: Daily Quest entry data cleared: %s", entry.entry_id)
