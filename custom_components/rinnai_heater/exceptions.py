"""Exceptions raised by the Rinnai Heater API."""

from homeassistant.exceptions import HomeAssistantError


class RinnaiHeaterError(HomeAssistantError):
    """Base exception for Rinnai Heater."""


class TransportError(RinnaiHeaterError):
    """Connection failure, timeout or non-2xx response from the device."""


class ParseError(RinnaiHeaterError):
    """Telemetry line is too short or has a non-numeric field."""


class InvalidTemperatureError(RinnaiHeaterError):
    """Requested temperature could not be mapped to a supported value."""


class StateUnavailableError(RinnaiHeaterError):
    """Current target temperature is unknown even after a forced refresh."""


class MaxRetriesExceededError(RinnaiHeaterError):
    """Temperature convergence gave up after repeated failures."""


class ConvergenceStalledError(MaxRetriesExceededError):
    """Steps kept succeeding without the heater reaching the target."""
