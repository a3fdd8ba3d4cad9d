"""Direct unit tests for DailyQuestStorageManager.

Covers loading, the delayed save handed to the tracker, immediate saves with
their error handling, and storage removal.
"""

# pylint: disable=protected-access  # Accessing _store for testing
# pylint: disable=redefined-outer-name  # Pytest fixtures redefine names

from unittest.mock import AsyncMock, patch

import pytest
from homeassistant.core import HomeAssistant

from custom_components.dailyquest import const
from custom_components.dailyquest.data_builders import build_default_state
from custom_components.dailyquest.storage_manager import DailyQuestStorageManager


@pytest.fixture
def storage_manager(hass: HomeAssistant) -> DailyQuestStorageManager:
    """Return a storage manager instance."""
    return DailyQuestStorageManager(hass)


async def _load_snapshot(
    manager: DailyQuestStorageManager, snapshot: dict
) -> None:
    """Give the manager a snapshot through a patched storage load."""
    with patch.object(manager._store, "async_load", return_value=snapshot):
        await manager.async_initialize()


async def test_async_initialize_without_storage(
    storage_manager: DailyQuestStorageManager,
) -> None:
    """Without a storage file the manager holds the default document."""
    with patch.object(storage_manager._store, "async_load", return_value=None):
        loaded = await storage_manager.async_initialize()

    assert loaded is None
    assert storage_manager.has_stored_data is False
    assert storage_manager.data == build_default_state()


async def test_async_initialize_with_storage(
    storage_manager: DailyQuestStorageManager,
) -> None:
    """An existing storage file is kept as the current snapshot."""
    stored = dict(build_default_state())
    stored[const.DATA_TODAY] = "2026-10-19"

    with patch.object(storage_manager._store, "async_load", return_value=stored):
        loaded = await storage_manager.async_initialize()

    assert loaded is stored
    assert storage_manager.has_stored_data is True
    assert storage_manager.data[const.DATA_TODAY] == "2026-10-19"


async def test_schedule_save_uses_delayed_write(
    storage_manager: DailyQuestStorageManager,
) -> None:
    """Snapshots are written through the store's delayed save."""
    snapshot = {const.DATA_TODAY: "2026-10-19"}

    with patch.object(storage_manager._store, "async_delay_save") as mock_delay:
        storage_manager.schedule_save(snapshot)

    mock_delay.assert_called_once()
    data_func, delay = mock_delay.call_args.args
    assert delay == const.STORAGE_SAVE_DELAY
    assert data_func() == snapshot
    assert storage_manager.data == snapshot


async def test_async_save_writes_snapshot(
    storage_manager: DailyQuestStorageManager,
) -> None:
    """async_save writes the current snapshot immediately."""
    await _load_snapshot(storage_manager, {const.DATA_TODAY: "2026-10-19"})

    with patch.object(storage_manager._store, "async_save", new=AsyncMock()) as save:
        await storage_manager.async_save()

    save.assert_awaited_once_with({const.DATA_TODAY: "2026-10-19"})


@pytest.mark.parametrize("error", [OSError("disk full"), TypeError("set"), ValueError])
async def test_async_save_logs_errors(
    storage_manager: DailyQuestStorageManager,
    error: Exception,
) -> None:
    """Save failures are logged, never raised."""
    with (
        patch.object(
            storage_manager._store, "async_save", new=AsyncMock(side_effect=error)
        ),
        patch.object(const.LOGGER, "error") as mock_error,
    ):
        await storage_manager.async_save()

    mock_error.assert_called_once()


async def test_async_delete_storage(
    storage_manager: DailyQuestStorageManager,
) -> None:
    """Deleting storage removes the file and resets the snapshot."""
    await _load_snapshot(storage_manager, {const.DATA_TODAY: "2026-10-19"})

    with patch.object(
        storage_manager._store, "async_remove", new=AsyncMock()
    ) as mock_remove:
        await storage_manager.async_delete_storage()

    mock_remove.assert_awaited_once()
    assert storage_manager.data == build_default_state()


async def test_async_delete_storage_logs_os_error(
    storage_manager: DailyQuestStorageManager,
) -> None:
    """A failing removal is logged."""
    with (
        patch.object(
            storage_manager._store,
            "async_remove",
            new=AsyncMock(side_effect=OSError("denied")),
        ),
        patch.object(const.LOGGER, "error") as mock_error,
    ):
        await storage_manager.async_delete_storage()

    mock_error.assert_called_once()


async def test_storage_key_default(hass: HomeAssistant) -> None:
    """The default key is the integration's storage key."""
    manager = DailyQuestStorageManager(hass)
    assert manager._store.key == const.STORAGE_KEY
