# File: options_flow.py
"""Options Flow for the Daily Quest integration.

Manages the update interval of the periodic date check and reloads the
integration when it changes.
"""

from typing import Any, Optional

import voluptuous as vol
from homeassistant import config_entries
from homeassistant.helpers import selector

from . import const


def build_general_options_schema(default: Optional[dict[str, Any]] = None):
    """Build the schema for the general options step."""
    default = default or {}
    default_interval = default.get(
        const.CONF_UPDATE_INTERVAL, const.DEFAULT_UPDATE_INTERVAL
    )

    return vol.Schema(
        {
            vol.Required(
                const.CONF_UPDATE_INTERVAL, default=default_interval
            ): selector.NumberSelector(
                selector.NumberSelectorConfig(
                    mode=selector.NumberSelectorMode.BOX,
                    min=1,
                    max=const.MAX_UPDATE_INTERVAL,
                    step=1,
                )
            ),
        }
    )


class DailyQuestOptionsFlowHandler(config_entries.OptionsFlow):
    """Options Flow for Daily Quest settings."""

    def __init__(self) -> None:
        """Initialize the options flow."""
        self._entry_options: dict[str, Any] = {}

    async def async_step_init(self, user_input: Optional[dict[str, Any]] = None):
        """Manage general options: update interval."""
        self._entry_options = dict(self.config_entry.options)

        if user_input is not None:
            self._entry_options[const.CONF_UPDATE_INTERVAL] = int(
                user_input[const.CONF_UPDATE_INTERVAL]
            )
            const.LOGGER.debug(
                "DEBUG: General Options Updated: Update Interval=%s",
                self._entry_options[const.CONF_UPDATE_INTERVAL],
            )
            await self._update_settings_and_reload()
            return self.async_create_entry(title="", data=self._entry_options)

        return self.async_show_form(
            step_id=const.OPTIONS_FLOW_STEP_INIT,
            data_schema=build_general_options_schema(self._entry_options),
        )

    async def _update_settings_and_reload(self):
        """Store the options on the entry and reload it."""
        self.hass.config_entries.async_update_entry(
            self.config_entry, options=self._entry_options
        )
        const.LOGGER.debug(
            "DEBUG: Updating settings. Reloading entry: %s",
            self.config_entry.entry_id,
        )
        await self.hass.config_entries.async_reload(self.config_entry.entry_id)
        const.LOGGER.debug("DEBUG: Settings updated and Daily Quest reloaded")
