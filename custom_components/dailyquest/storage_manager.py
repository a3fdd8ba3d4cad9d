# File: storage_manager.py
"""Handles persistent data storage for the Daily Quest integration.

Uses Home Assistant's Storage helper to save and load the whole Daily Quest
document (day ledger, badges, achievements, progression), ensuring the state
is preserved across restarts.
"""

from __future__ import annotations

from typing import Any

from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers.storage import Store

from . import const
from .data_builders import build_default_state


class DailyQuestStorageManager:
    """Manages loading, saving, and accessing data from Home Assistant's storage.

    The tracker owns the live state; this class keeps the latest snapshot the
    tracker handed over and writes it to disk.
    """

    def __init__(
        self, hass: HomeAssistant, storage_key: str = const.STORAGE_KEY
    ) -> None:
        """Initialize the storage manager.

        Args:
            hass: Home Assistant core object.
            storage_key: Key to identify storage location (default: const.STORAGE_KEY).

        """
        self.hass = hass
        self._storage_key = storage_key
        self._store: Store = Store(hass, const.STORAGE_VERSION, storage_key)
        self._data: dict[str, Any] = {}  # Latest snapshot from the tracker.
        self._loaded = False

    async def async_initialize(self) -> dict[str, Any] | None:
        """Load data from storage during startup.

        Returns the stored document, or None when nothing was stored yet.
        """
        const.LOGGER.debug("DEBUG: DailyQuestStorageManager: Loading data from storage")
        existing_data = await self._store.async_load()

        if existing_data is None:
            const.LOGGER.info("INFO: No existing storage found. Initializing new data")
            self._data = dict(build_default_state())
        else:
            self._data = existing_data
            self._loaded = True
            const.LOGGER.debug(
                "DEBUG: Loaded existing data from storage: %s",
                {
                    "days": len(self._data.get(const.DATA_HISTORY, {})),
                    "badges": len(self._data.get(const.DATA_BADGES, [])),
                    "total_keys": len(self._data.keys()),
                },
            )
        return existing_data

    @property
    def data(self) -> dict[str, Any]:
        """Retrieve the latest snapshot."""
        return self._data

    @property
    def has_stored_data(self) -> bool:
        """True when startup found an existing storage file."""
        return self._loaded

    @callback
    def schedule_save(self, new_data: dict[str, Any]) -> None:
        """Take a new snapshot and schedule a delayed write.

        Bursts of changes within ``const.STORAGE_SAVE_DELAY`` seconds are
        written once. Must run in the event loop.
        """
        self._data = new_data
        self._store.async_delay_save(lambda: self._data, const.STORAGE_SAVE_DELAY)

    async def async_save(self) -> None:
        """Save the current snapshot to storage immediately.

        Raises:
            No exceptions raised - errors are logged but do not stop execution.
            OSError: Logged when file system issues prevent saving.
            TypeError: Logged when data contains non-serializable types.
            ValueError: Logged when data is invalid for JSON serialization.
        """
        try:
            await self._store.async_save(self._data)
            const.LOGGER.debug("DEBUG: Data saved successfully to storage")
        except OSError as err:
            const.LOGGER.error(
                "ERROR: Failed to save storage due to file system error: %s. "
                "Check disk space and file permissions for %s",
                err,
                self._store.path,
            )
        except TypeError as err:
            const.LOGGER.error(
                "ERROR: Failed to save storage due to non-serializable data: %s. "
                "Data contains types that cannot be converted to JSON",
                err,
            )
        except ValueError as err:
            const.LOGGER.error(
                "ERROR: Failed to save storage due to invalid data format: %s. "
                "Data structure may be corrupted",
                err,
            )

    async def async_delete_storage(self) -> None:
        """Delete the storage file completely from disk."""
        self._data = dict(build_default_state())
        try:
            await self._store.async_remove()
            const.LOGGER.info(
                "INFO: Storage file removed successfully: %s",
                self._store.path,
            )
        except OSError as err:
            const.LOGGER.error(
                "ERROR: Failed to remove storage file %s: %s. Check file permissions",
                self._store.path,
                err,
            )
