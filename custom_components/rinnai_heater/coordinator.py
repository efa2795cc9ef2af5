"""DataUpdateCoordinator for rinnai_heater."""
from __future__ import annotations

from datetime import timedelta
import time

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from .api import RinnaiHeaterApi
from .const import DEFAULT_PARAMS_INTERVAL, DOMAIN, LOGGER
from .exceptions import RinnaiHeaterError
from .models import ConsumptionSample, DeviceState, ExtendedDeviceParams, RinnaiHeaterData


class RinnaiHeaterDataUpdateCoordinator(DataUpdateCoordinator[RinnaiHeaterData]):
    """Class to manage fetching data from the API."""

    def __init__(
        self,
        hass: HomeAssistant,
        api: RinnaiHeaterApi,
        update_interval: int,
        config_entry: ConfigEntry | None = None,
        params_interval: int = DEFAULT_PARAMS_INTERVAL,
    ) -> None:
        """Initialize."""
        self.api = api
        self.platforms = []
        self.problem_flag = False
        self.identifier: str | None = None
        self._params_interval = params_interval
        self._params_expires = 0.0
        self._last_params: ExtendedDeviceParams | None = None
        self._last_consumption: ConsumptionSample | None = None

        super().__init__(
            hass=hass,
            logger=LOGGER,
            name=DOMAIN,
            update_interval=timedelta(seconds=update_interval),
            config_entry=config_entry,
        )

    async def _async_update_data(self) -> RinnaiHeaterData:
        """Force-refresh the state; refresh diagnostics when they expire."""
        try:
            state = await self.api.async_poll_state()
        except Exception as exception:
            self.problem_flag = True
            raise UpdateFailed(str(exception)) from exception
        self.problem_flag = False

        now = time.monotonic()
        if now >= self._params_expires and not self.api.write_in_progress:
            self._params_expires = now + self._params_interval
            await self._async_refresh_diagnostics()

        result = RinnaiHeaterData(state=state, params=self._last_params, consumption=self._last_consumption)
        LOGGER.debug("%s - Fetched data: %s", DOMAIN, result)
        return result

    async def _async_refresh_diagnostics(self) -> None:
        """Fetch bus and consumo, keeping the previous snapshot on failure."""
        try:
            self._last_params = await self.api.async_get_device_params()
        except RinnaiHeaterError as err:
            LOGGER.debug("%s - Device params refresh failed, keeping last: %s", DOMAIN, err)
        try:
            self._last_consumption = await self.api.async_get_consumption()
        except RinnaiHeaterError as err:
            LOGGER.debug("%s - Consumption refresh failed, keeping last: %s", DOMAIN, err)

    def async_set_state(self, state: DeviceState) -> None:
        """Push a state returned by a control call to listeners."""
        self.async_set_updated_data(
            RinnaiHeaterData(state=state, params=self._last_params, consumption=self._last_consumption)
        )
