# File: services.py
"""Defines custom services for the Daily Quest integration.

These services allow goal updates, mission toggles, mood entries and data
maintenance directly through scripts or automations. Mutation services return
the tracker's result (badges created, XP awarded, level-up) as an optional
service response.
"""

from typing import Any, Optional

import voluptuous as vol
from homeassistant.core import (
    HomeAssistant,
    ServiceCall,
    ServiceResponse,
    SupportsResponse,
)
from homeassistant.exceptions import HomeAssistantError, ServiceValidationError
from homeassistant.helpers import config_validation as cv

from . import const
from .catalog import get_goal
from .coordinator import DailyQuestDataCoordinator
from .utils.math_utils import coerce_number

# --- Service Schemas ---
UPDATE_GOAL_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_GOAL_ID): cv.string,
        vol.Required(const.FIELD_VALUE): vol.Any(bool, vol.Coerce(float), cv.string),
    }
)

ADJUST_GOAL_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_GOAL_ID): cv.string,
        vol.Required(const.FIELD_DELTA): vol.Coerce(float),
    }
)

TOGGLE_MISSION_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_MISSION_ID): cv.string,
    }
)

SET_MOOD_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_EMOJI): cv.string,
        vol.Optional(const.FIELD_TEXT, default=""): cv.string,
    }
)

EXPORT_DATA_SCHEMA = vol.Schema({})

IMPORT_DATA_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_DATA): cv.string,
    }
)

RESET_ALL_DATA_SCHEMA = vol.Schema({})

REFRESH_TODAY_SCHEMA = vol.Schema({})

GET_HISTORY_SCHEMA = vol.Schema({})


def _get_first_entry_id(hass: HomeAssistant) -> Optional[str]:
    """Retrieve the first Daily Quest config entry ID."""
    domain_entries = hass.data.get(const.DOMAIN)
    if not domain_entries:
        return None
    return next(iter(domain_entries.keys()), None)


def _get_coordinator(hass: HomeAssistant, service: str) -> DailyQuestDataCoordinator:
    """Coordinator of the loaded entry, or HomeAssistantError when none is loaded."""
    entry_id = _get_first_entry_id(hass)
    if not entry_id:
        const.LOGGER.warning("WARNING: %s: %s", service, const.MSG_NO_ENTRY_FOUND)
        raise HomeAssistantError(const.MSG_NO_ENTRY_FOUND)
    return hass.data[const.DOMAIN][entry_id][const.COORDINATOR]


def async_setup_services(hass: HomeAssistant):
    """Register Daily Quest services."""

    async def handle_update_goal(call: ServiceCall) -> ServiceResponse:
        """Handle setting today's value of a goal."""
        coordinator = _get_coordinator(hass, const.SERVICE_UPDATE_GOAL)
        goal_id = call.data[const.FIELD_GOAL_ID]
        value = call.data[const.FIELD_VALUE]

        goal = get_goal(goal_id)
        if goal is None:
            raise ServiceValidationError(const.ERROR_GOAL_NOT_FOUND_FMT.format(goal_id))
        if goal.is_counter and coerce_number(value) is None:
            raise ServiceValidationError(
                const.ERROR_INVALID_GOAL_VALUE_FMT.format(value, goal_id)
            )

        result = coordinator.tracker.update_goal(goal_id, value)
        const.LOGGER.info(
            "INFO: Goal '%s' updated to %s (xp_awarded=%s)",
            goal_id,
            result["value"],
            result["xp_awarded"],
        )
        coordinator.async_publish()
        return dict(result)

    async def handle_adjust_goal(call: ServiceCall) -> ServiceResponse:
        """Handle adding a delta to today's value of a goal."""
        coordinator = _get_coordinator(hass, const.SERVICE_ADJUST_GOAL)
        goal_id = call.data[const.FIELD_GOAL_ID]
        delta = call.data[const.FIELD_DELTA]

        if get_goal(goal_id) is None:
            raise ServiceValidationError(const.ERROR_GOAL_NOT_FOUND_FMT.format(goal_id))

        result = coordinator.tracker.adjust_goal(goal_id, delta)
        const.LOGGER.info(
            "INFO: Goal '%s' adjusted by %s to %s", goal_id, delta, result["value"]
        )
        coordinator.async_publish()
        return dict(result)

    async def handle_toggle_mission(call: ServiceCall) -> ServiceResponse:
        """Handle flipping completion of one of today's missions."""
        coordinator = _get_coordinator(hass, const.SERVICE_TOGGLE_MISSION)
        mission_id = call.data[const.FIELD_MISSION_ID]

        result = coordinator.tracker.toggle_mission(mission_id)
        if not result["found"]:
            raise ServiceValidationError(
                const.ERROR_MISSION_NOT_FOUND_FMT.format(mission_id)
            )

        const.LOGGER.info(
            "INFO: Mission '%s' toggled (completed=%s)",
            mission_id,
            result["completed"],
        )
        coordinator.async_publish()
        return dict(result)

    async def handle_set_mood(call: ServiceCall) -> ServiceResponse:
        """Handle recording today's mood."""
        coordinator = _get_coordinator(hass, const.SERVICE_SET_MOOD)
        result = coordinator.tracker.set_mood(
            call.data[const.FIELD_EMOJI], call.data.get(const.FIELD_TEXT, "")
        )
        const.LOGGER.debug("DEBUG: Mood set for %s", result["date"])
        coordinator.async_publish()
        return dict(result)

    async def handle_export_data(call: ServiceCall) -> ServiceResponse:
        """Return the whole Daily Quest document as a JSON string."""
        coordinator = _get_coordinator(hass, const.SERVICE_EXPORT_DATA)
        payload = coordinator.tracker.export_state()
        const.LOGGER.info("INFO: Exported Daily Quest data (%s bytes)", len(payload))
        return {const.FIELD_DATA: payload.decode("utf-8")}

    async def handle_import_data(call: ServiceCall) -> None:
        """Replace the whole state with an exported document."""
        coordinator = _get_coordinator(hass, const.SERVICE_IMPORT_DATA)
        if not coordinator.tracker.import_state(call.data[const.FIELD_DATA]):
            raise HomeAssistantError(const.ERROR_IMPORT_FAILED)
        coordinator.async_publish()

    async def handle_reset_all_data(call: ServiceCall) -> None:
        """Handle wiping all Daily Quest data."""
        coordinator = _get_coordinator(hass, const.SERVICE_RESET_ALL_DATA)
        coordinator.tracker.reset()
        const.LOGGER.info("INFO: Manually reset all Daily Quest data")
        coordinator.async_publish()

    async def handle_refresh_today(call: ServiceCall) -> ServiceResponse:
        """Handle a forced date check for today's record."""
        coordinator = _get_coordinator(hass, const.SERVICE_REFRESH_TODAY)
        result = coordinator.tracker.ensure_today()
        coordinator.async_publish()
        return dict(result)

    async def handle_get_history(call: ServiceCall) -> ServiceResponse:
        """Return every recorded day, newest first."""
        coordinator = _get_coordinator(hass, const.SERVICE_GET_HISTORY)
        return {const.FIELD_HISTORY: coordinator.tracker.get_history_view()}

    # --- Register Services ---
    registrations: list[tuple[str, Any, vol.Schema, SupportsResponse]] = [
        (
            const.SERVICE_UPDATE_GOAL,
            handle_update_goal,
            UPDATE_GOAL_SCHEMA,
            SupportsResponse.OPTIONAL,
        ),
        (
            const.SERVICE_ADJUST_GOAL,
            handle_adjust_goal,
            ADJUST_GOAL_SCHEMA,
            SupportsResponse.OPTIONAL,
        ),
        (
            const.SERVICE_TOGGLE_MISSION,
            handle_toggle_mission,
            TOGGLE_MISSION_SCHEMA,
            SupportsResponse.OPTIONAL,
        ),
        (
            const.SERVICE_SET_MOOD,
            handle_set_mood,
            SET_MOOD_SCHEMA,
            SupportsResponse.OPTIONAL,
        ),
        (
            const.SERVICE_EXPORT_DATA,
            handle_export_data,
            EXPORT_DATA_SCHEMA,
            SupportsResponse.ONLY,
        ),
        (
            const.SERVICE_IMPORT_DATA,
            handle_import_data,
            IMPORT_DATA_SCHEMA,
            SupportsResponse.NONE,
        ),
        (
            const.SERVICE_RESET_ALL_DATA,
            handle_reset_all_data,
            RESET_ALL_DATA_SCHEMA,
            SupportsResponse.NONE,
        ),
        (
            const.SERVICE_REFRESH_TODAY,
            handle_refresh_today,
            REFRESH_TODAY_SCHEMA,
            SupportsResponse.OPTIONAL,
        ),
        (
            const.SERVICE_GET_HISTORY,
            handle_get_history,
            GET_HISTORY_SCHEMA,
            SupportsResponse.ONLY,
        ),
    ]
    for service, handler, schema, supports_response in registrations:
        hass.services.async_register(
            const.DOMAIN,
            service,
            handler,
            schema=schema,
            supports_response=supports_response,
        )

    const.LOGGER.info("INFO: Daily Quest services have been registered successfully")


async def async_unload_services(hass: HomeAssistant):
    """Unregister Daily Quest services when unloading the integration."""
    services = [
        const.SERVICE_UPDATE_GOAL,
        const.SERVICE_ADJUST_GOAL,
        const.SERVICE_TOGGLE_MISSION,
        const.SERVICE_SET_MOOD,
        const.SERVICE_EXPORT_DATA,
        const.SERVICE_IMPORT_DATA,
        const.SERVICE_RESET_ALL_DATA,
        const.SERVICE_REFRESH_TODAY,
        const.SERVICE_GET_HISTORY,
    ]

    for service in services:
        if hass.services.has_service(const.DOMAIN, service):
            hass.services.async_remove(const.DOMAIN, service)

    const.LOGGER.info("INFO: Daily Quest services have been unregistered")
