"""Pytest configuration and fixtures for Rinnai Heater tests."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from homeassistant.core import HomeAssistant

from custom_components.rinnai_heater.api import RinnaiHeaterApi
from custom_components.rinnai_heater.const import DOMAIN

HOST = "192.168.1.20"

# bus: power code, working time (4), power in hundredths of kcal (9), inlet/outlet (10/11), flow (12), target index (18)
PARAMS_LINE = "10,0,1,0,3600,0,0,0,0,174450,2150,4020,1250,0,0,0,0,0,8"
CONSUMPTION_LINE = "12:30,152300,94000"


class FakeResponse:
    """Minimal aiohttp response."""

    def __init__(self, status: int, body: str | bytes) -> None:
        self.status = status
        self._body = body

    async def text(self) -> str:
        if isinstance(self._body, bytes):
            return self._body.decode("utf-8")
        return self._body

    async def __aenter__(self) -> FakeResponse:
        return self

    async def __aexit__(self, *exc_info) -> bool:
        return False


class FakeHeater:
    """Stands in for the aiohttp session and emulates the heater's endpoints.

    The target temperature is kept as the raw device index (Celsius + 3 offset
    into the 35..45 table, so index 8 is 40 C).
    """

    def __init__(self, index: int = 8, power_code: str = "10", heating: str = "0") -> None:
        self.index = index
        self.power_code = power_code
        self.heating = heating
        self.identifier = "RINNAI-0001"
        self.params_line = PARAMS_LINE
        self.consumption_line = CONSUMPTION_LINE
        self.calls: list[str] = []
        self.urls: list[str] = []
        self.failures: dict[str, list[BaseException | int | str | bytes]] = {}

    def fail(self, endpoint: str, *failures: BaseException | int | str | bytes) -> None:
        """Queue failures for an endpoint: an exception to raise, an HTTP status, or a body (text or raw bytes) to return."""
        self.failures.setdefault(endpoint, []).extend(failures)

    def state_line(self) -> str:
        return f"{self.power_code},0,{self.heating},0,0,0,{HOST}:80,{self.index},0"

    def count(self, endpoint: str) -> int:
        return self.calls.count(endpoint)

    def get(self, url: str, timeout=None) -> FakeResponse:
        endpoint = url.rsplit("/", 1)[-1]
        self.calls.append(endpoint)
        self.urls.append(url)

        pending = self.failures.get(endpoint)
        if pending:
            failure = pending.pop(0)
            if isinstance(failure, BaseException):
                raise failure
            if isinstance(failure, int):
                return FakeResponse(failure, "")
            return FakeResponse(200, failure)

        if endpoint == "inc":
            self.index = min(self.index + 1, 13)
        elif endpoint == "dec":
            self.index = max(self.index - 1, 3)
        elif endpoint == "lig":
            self.power_code = "10" if self.power_code == "11" else "11"
        elif endpoint == "bus":
            return FakeResponse(200, self.params_line)
        elif endpoint == "consumo":
            return FakeResponse(200, self.consumption_line)
        elif endpoint == "connect":
            return FakeResponse(200, self.identifier)
        elif endpoint != "tela_":
            return FakeResponse(404, "")
        return FakeResponse(200, self.state_line())


@pytest.fixture
def mock_hass() -> HomeAssistant:
    """Mock Home Assistant instance."""
    hass = MagicMock(spec=HomeAssistant)
    hass.data = {DOMAIN: {}}
    return hass


@pytest.fixture
def heater() -> FakeHeater:
    """Heater at 40 C, powered on, idle."""
    return FakeHeater()


@pytest.fixture
def api(mock_hass: HomeAssistant, heater: FakeHeater):
    """API wired to the fake heater, with no delay between steps."""
    with patch("custom_components.rinnai_heater.api.async_get_clientsession", return_value=heater):
        yield RinnaiHeaterApi(mock_hass, HOST, test_step_delay=0)
