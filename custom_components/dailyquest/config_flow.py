# File: config_flow.py
"""Config flow for the Daily Quest integration.

Daily Quest keeps one tracker per Home Assistant instance, so the flow is a
single confirmation step that refuses a second entry.
"""

from typing import Any, Optional

import voluptuous as vol
from homeassistant import config_entries
from homeassistant.core import callback

from . import const
from .options_flow import DailyQuestOptionsFlowHandler


class DailyQuestConfigFlow(config_entries.ConfigFlow, domain=const.DOMAIN):
    """Config Flow for Daily Quest."""

    VERSION = 1

    async def async_step_user(self, user_input: Optional[dict[str, Any]] = None):
        """Confirm the setup; only one entry is allowed."""

        # Check if there's an existing Daily Quest entry
        if any(self._async_current_entries()):
            return self.async_abort(reason=const.TRANS_KEY_ERROR_SINGLE_INSTANCE)

        if user_input is not None:
            const.LOGGER.info("INFO: Creating Daily Quest config entry")
            return self.async_create_entry(title=const.DAILYQUEST_TITLE, data={})

        return self.async_show_form(
            step_id=const.CONFIG_FLOW_STEP_USER, data_schema=vol.Schema({})
        )

    @staticmethod
    @callback
    def async_get_options_flow(config_entry):
        """Return the Options Flow."""
        return DailyQuestOptionsFlowHandler()
