"""Adds config flow for Rinnai Heater."""
from __future__ import annotations

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.const import CONF_HOST
from homeassistant.core import callback

from .api import RinnaiHeaterApi
from .const import (
    CONF_PARAMS_INTERVAL,
    CONF_SCAN_INTERVAL,
    DEFAULT_PARAMS_INTERVAL,
    DEFAULT_SCAN_INTERVAL,
    DOMAIN,
    LOGGER,
)
from .exceptions import RinnaiHeaterError


class ConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Config flow for rinnai_heater."""

    VERSION = 1

    def __init__(self):
        """Initialise the flow with no errors."""
        self._errors = {}

    async def async_step_user(self, user_input=None):
        """Handle a flow initialized by the user."""
        self._errors = {}

        if user_input is not None:
            host = user_input[CONF_HOST].strip()
            # Don't allow duplicates
            for entry in self._async_current_entries():
                if host == entry.data.get(CONF_HOST):
                    return self.async_abort(reason="host_already_exists")

            identifier = await self._test_host(host)
            if identifier is not None:
                await self.async_set_unique_id(identifier.strip() or host)
                self._abort_if_unique_id_configured()
                return self.async_create_entry(title=host, data={CONF_HOST: host})
            self._errors["base"] = "connection"

        return await self._show_config_form(user_input)

    async def _show_config_form(self, user_input):  # pylint: disable=unused-argument
        return self.async_show_form(
            step_id="user",
            data_schema=vol.Schema({vol.Required(CONF_HOST): str}),
            errors=self._errors,
        )

    async def _test_host(self, host: str) -> str | None:
        """Return the device identifier, or None when the host does not answer."""
        try:
            return await RinnaiHeaterApi(self.hass, host=host).async_identify()
        except RinnaiHeaterError as ex:
            LOGGER.error("%s Exception in connection to %s: %s", DOMAIN, host, ex)
        return None

    @staticmethod
    @callback
    def async_get_options_flow(config_entry: config_entries.ConfigEntry) -> config_entries.OptionsFlow:
        """Create the options flow."""
        return OptionsFlowHandler()


class OptionsFlowHandler(config_entries.OptionsFlow):
    """Options flow for Rinnai Heater."""

    async def async_step_init(self, user_input=None):
        """Manage poll intervals."""
        if user_input is not None:
            return self.async_create_entry(title="", data=user_input)

        options = self.config_entry.options
        return self.async_show_form(
            step_id="init",
            data_schema=vol.Schema(
                {
                    vol.Required(
                        CONF_SCAN_INTERVAL,
                        default=options.get(CONF_SCAN_INTERVAL, DEFAULT_SCAN_INTERVAL),
                    ): vol.All(vol.Coerce(int), vol.Range(min=1, max=300)),
                    vol.Required(
                        CONF_PARAMS_INTERVAL,
                        default=options.get(CONF_PARAMS_INTERVAL, DEFAULT_PARAMS_INTERVAL),
                    ): vol.All(vol.Coerce(int), vol.Range(min=10, max=3600)),
                }
            ),
        )
