"""Presentation state for interactive weather lookups."""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import structlog

from src.models.outcome import InvalidCityInput, WeatherOutcome
from src.services.weather_service import WeatherService

logger = structlog.get_logger(__name__)


class WeatherStatus(str, Enum):
    """Lifecycle of the lookup shown to the user."""

    INITIAL = "initial"
    LOADING = "loading"
    VALIDATION_ERROR = "validation_error"
    LOADED = "loaded"


@dataclass(frozen=True)
class WeatherState:
    """Current presentation state; ``outcome`` is set only when LOADED."""

    status: WeatherStatus
    outcome: Optional[WeatherOutcome] = None


INITIAL_STATE = WeatherState(WeatherStatus.INITIAL)


class WeatherStateHolder:
    """Drives a WeatherService from user submissions.

    A new submission supersedes the one in flight: the older task is
    cancelled and never publishes a state.
    """

    def __init__(self, service: WeatherService):
        self._service = service
        self._state = INITIAL_STATE
        self._task: asyncio.Task | None = None
        self._subscribers: list[Callable[[WeatherState], None]] = []

    @property
    def state(self) -> WeatherState:
        return self._state

    def subscribe(self, callback: Callable[[WeatherState], None]) -> None:
        """Register a callback invoked on every state change."""
        self._subscribers.append(callback)

    def _publish(self, state: WeatherState) -> None:
        self._state = state
        for callback in self._subscribers:
            callback(state)

    def submit(self, city: str) -> asyncio.Task:
        """Start a lookup for ``city``, cancelling any lookup still running.

        Must be called from within a running event loop.
        """
        if self._task is not None and not self._task.done():
            logger.debug("weather_lookup_superseded")
            self._task.cancel()

        self._publish(WeatherState(WeatherStatus.LOADING))
        self._task = asyncio.create_task(self._run(city))
        return self._task

    async def _run(self, city: str) -> None:
        result = await self._service.resolve(city)
        if asyncio.current_task() is not self._task:
            return
        if isinstance(result, InvalidCityInput):
            self._publish(WeatherState(WeatherStatus.VALIDATION_ERROR))
        else:
            self._publish(WeatherState(WeatherStatus.LOADED, outcome=result))

    async def aclose(self) -> None:
        """Cancel the in-flight lookup, if any, and wait for it to finish."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass
