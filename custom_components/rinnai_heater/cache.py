"""Single-slot cache of the last decoded heater state."""

from __future__ import annotations

import asyncio

from .models import DeviceState


class StateCache:
    """Holds the most recent DeviceState.

    Empty until the first successful read or command. There is no expiry:
    callers force a refetch when they need a fresh value. Anything that reads,
    fetches and stores must do so while holding ``lock``.
    """

    def __init__(self) -> None:
        """Start empty."""
        self.lock = asyncio.Lock()
        self._state: DeviceState | None = None

    @property
    def state(self) -> DeviceState | None:
        """Return the cached state, if any."""
        return self._state

    def store(self, state: DeviceState) -> DeviceState:
        """Replace the cached state and return it."""
        self._state = state
        return state
