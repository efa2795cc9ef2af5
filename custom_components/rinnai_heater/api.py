"""All API calls belong here (async, single writer)."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from aiohttp import ClientError, ClientTimeout
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from .cache import StateCache
from .const import (
    DOMAIN,
    ENDPOINT_CONSUMPTION,
    ENDPOINT_DECREASE,
    ENDPOINT_IDENTIFY,
    ENDPOINT_INCREASE,
    ENDPOINT_PARAMS,
    ENDPOINT_POWER,
    ENDPOINT_STATE,
    LOGGER,
    MAX_STEP_RETRIES,
    STEP_DELAY,
    SUPPORTED_TEMPERATURES,
)
from .exceptions import (
    ConvergenceStalledError,
    InvalidTemperatureError,
    MaxRetriesExceededError,
    ParseError,
    StateUnavailableError,
    TransportError,
)
from .models import ConsumptionSample, DeviceState, ExtendedDeviceParams
from .parser import parse_consumption, parse_device_params, parse_state
from .temperature import map_requested_to_supported


@dataclass
class _ConvergenceProgress:
    """Carried between steps of a target temperature change."""

    retries: int = 0
    last_known_target: int | None = None
    steps: int = 0


class RinnaiHeaterApi:
    """Define the Rinnai heater API.

    The heater only understands single-step commands, so setting a target
    temperature walks it one degree at a time. Every command reply is a full
    state line which refreshes the shared cache.
    """

    REQUEST_TIMEOUT = ClientTimeout(total=10.0)
    STEP_DELAY = STEP_DELAY  # seconds between successful steps
    MAX_STEP_RETRIES = MAX_STEP_RETRIES
    MAX_STEPS = 2 * (len(SUPPORTED_TEMPERATURES) - 1)

    def __init__(
        self,
        hass,
        host: str,
        *,
        cache: StateCache | None = None,
        test_step_delay: float | None = None,
    ) -> None:
        """Initialise the basic parameters.

        Args:
            hass: Home Assistant instance
            host: Device hostname/IP
            cache: Optional state cache (a fresh one is created otherwise)
            test_step_delay: Optional override for STEP_DELAY (testing only)
        """
        self.hass = hass
        self.host = host
        self.base_url = f"http://{host}/"
        self.cache = cache if cache is not None else StateCache()

        self._effective_step_delay = test_step_delay if test_step_delay is not None else self.STEP_DELAY

        self._request_lock = asyncio.Lock()
        self._write_lock = asyncio.Lock()
        self._req_counter = 0

    @property
    def write_in_progress(self) -> bool:
        """Return True while a temperature or power change is running."""
        return self._write_lock.locked()

    # ---------------------------------------------------------
    # Transport
    # ---------------------------------------------------------
    async def _async_request(self, endpoint: str) -> str:
        """GET an endpoint and return the body text."""
        req_id = self._req_counter = self._req_counter + 1
        async with self._request_lock:
            session = async_get_clientsession(self.hass)
            url = f"{self.base_url}{endpoint}"
            start = time.monotonic()
            LOGGER.debug("%s debug pre req=%s path=%s", DOMAIN, req_id, endpoint)
            try:
                async with session.get(url, timeout=self.REQUEST_TIMEOUT) as resp:
                    if not 200 <= resp.status < 300:
                        raise TransportError(f"{DOMAIN} - HTTP {resp.status} for {endpoint}")
                    try:
                        text = await resp.text()
                    except UnicodeDecodeError as decode_err:
                        raise ParseError(f"{DOMAIN} - Undecodable reply for {endpoint}") from decode_err
            except (ClientError, asyncio.TimeoutError) as err:
                LOGGER.debug(
                    "%s debug err req=%s path=%s error=%s elapsed_ms=%d",
                    DOMAIN,
                    req_id,
                    endpoint,
                    type(err).__name__,
                    int((time.monotonic() - start) * 1000),
                )
                raise TransportError(f"{DOMAIN} - Request failed for {endpoint}") from err
            LOGGER.debug(
                "%s debug ok req=%s path=%s elapsed_ms=%d bytes=%d",
                DOMAIN,
                req_id,
                endpoint,
                int((time.monotonic() - start) * 1000),
                len(text),
            )
            return text

    async def _async_fetch_state(self, endpoint: str) -> DeviceState:
        """Request, decode and cache a tela_ formatted reply. Caller holds the cache lock."""
        text = await self._async_request(endpoint)
        return self.cache.store(parse_state(text))

    async def _async_command(self, endpoint: str) -> DeviceState:
        """Send an endpoint whose reply is a full state line."""
        async with self.cache.lock:
            return await self._async_fetch_state(endpoint)

    # ---------------------------------------------------------
    # Device operations
    # ---------------------------------------------------------
    async def async_read_full_state(self) -> DeviceState:
        """Read the live state (tela_)."""
        return await self._async_command(ENDPOINT_STATE)

    async def async_step_temperature_up(self) -> DeviceState:
        """Raise the target temperature by one step (inc)."""
        return await self._async_command(ENDPOINT_INCREASE)

    async def async_step_temperature_down(self) -> DeviceState:
        """Lower the target temperature by one step (dec)."""
        return await self._async_command(ENDPOINT_DECREASE)

    async def async_toggle_power(self) -> DeviceState:
        """Flip the power state (lig)."""
        return await self._async_command(ENDPOINT_POWER)

    async def async_press_button(self, endpoint: str) -> DeviceState:
        """Send any command endpoint that answers with a state line."""
        return await self._async_command(endpoint.lstrip("/"))

    async def async_get_device_params(self) -> ExtendedDeviceParams:
        """Fetch diagnostics (bus). Never cached."""
        return parse_device_params(await self._async_request(ENDPOINT_PARAMS))

    async def async_get_consumption(self) -> ConsumptionSample:
        """Fetch consumption counters (consumo). Never cached."""
        return parse_consumption(await self._async_request(ENDPOINT_CONSUMPTION))

    async def async_identify(self) -> str:
        """Return the opaque identifier reported by connect."""
        return await self._async_request(ENDPOINT_IDENTIFY)

    # ---------------------------------------------------------
    # Public state / control APIs
    # ---------------------------------------------------------
    async def async_get_state(self, force_refresh: bool = False) -> DeviceState:
        """Return the cached state, fetching it when empty or forced."""
        async with self.cache.lock:
            cached = self.cache.state
            if cached is not None and not force_refresh:
                LOGGER.debug("%s - Returning cached state", DOMAIN)
                return cached
            return await self._async_fetch_state(ENDPOINT_STATE)

    async def async_poll_state(self) -> DeviceState:
        """Return state for the periodic poll.

        While a control sequence is in flight the cached state is returned
        instead of adding extra requests.
        """
        if self._write_lock.locked() and self.cache.state is not None:
            return self.cache.state
        return await self.async_get_state(force_refresh=True)

    async def async_set_target_temperature(self, target: float) -> DeviceState:
        """Step the heater until it reports the requested (clamped) temperature."""
        desired = map_requested_to_supported(target)
        if desired is None:
            raise InvalidTemperatureError(f"{DOMAIN} - No supported temperature for {target!r}")

        async with self._write_lock:
            LOGGER.debug("%s - Set temperature requested=%s desired=%s", DOMAIN, target, desired)
            return await self._async_converge(desired)

    async def _async_converge(self, desired: int) -> DeviceState:
        """Issue inc/dec steps until the reported target equals desired."""
        progress = _ConvergenceProgress()
        while True:
            try:
                current = progress.last_known_target
                if current is None:
                    refreshed = await self.async_get_state(force_refresh=True)
                    current = refreshed.target_temperature
                    LOGGER.debug("%s - No last target temperature, read %s from state", DOMAIN, current)
                if current is None:
                    raise StateUnavailableError(f"{DOMAIN} - Could not read the current target temperature")

                if current == desired:
                    LOGGER.debug("%s - Target temperature already %s", DOMAIN, desired)
                    return self.cache.state

                if progress.steps >= self.MAX_STEPS:
                    raise ConvergenceStalledError(
                        f"{DOMAIN} - Heater did not reach {desired} after {progress.steps} steps (stuck at {current})"
                    )

                step: Callable[[], Awaitable[DeviceState]] = (
                    self.async_step_temperature_down if current > desired else self.async_step_temperature_up
                )
                state = await step()
                progress.steps += 1
            except (TransportError, ParseError) as err:
                if progress.retries >= self.MAX_STEP_RETRIES:
                    LOGGER.error("%s - Set temperature to %s failed after %s retries: %s", DOMAIN, desired, progress.retries, err)
                    raise MaxRetriesExceededError(f"{DOMAIN} - Max number of retries reached") from err
                progress.retries += 1
                LOGGER.warning(
                    "%s - Set temperature step failed (%s), retry %s/%s", DOMAIN, type(err).__name__, progress.retries, self.MAX_STEP_RETRIES
                )
                continue

            if state.target_temperature == desired:
                LOGGER.info("%s - Target temperature set to %s in %s steps", DOMAIN, desired, progress.steps)
                return state

            LOGGER.debug("%s - Not yet at requested temperature: %s -> %s", DOMAIN, state.target_temperature, desired)
            progress.last_known_target = state.target_temperature
            progress.retries = 0
            await asyncio.sleep(self._effective_step_delay)

    async def async_set_power_state(self, turn_on: bool) -> DeviceState:
        """Toggle power once unless the cached state already matches."""
        async with self._write_lock:
            state = await self.async_get_state()
            if state.is_powered_on == turn_on:
                LOGGER.debug("%s - Power already %s", DOMAIN, "on" if turn_on else "off")
                return state
            state = await self.async_toggle_power()
            LOGGER.info("%s - Power toggled, heater now %s", DOMAIN, "on" if state.is_powered_on else "off")
            return state
