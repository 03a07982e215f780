from __future__ import annotations

"""Example producers: a GPS city lookup plus weather and forecast services.

The ``get_*`` functions are written in the old ``callback(error, result)``
style and settle on the scheduler after a short delay. The ``fetch_*``
functions wrap them into Operations. The last three producers misbehave on
purpose (failing, settling twice) and exist to exercise the settlement guard.
"""

from typing import Any, Callable, Dict, List

from operette.core.adapters import from_callback
from operette.core.operation import Operation
from operette.errors import CityRequiredError
from operette.scheduler import Scheduler, default_scheduler
from operette.utils.logging import log

__all__ = [
    "DEFAULT_CITY",
    "DEFAULT_DELAY_MS",
    "get_current_city",
    "get_weather",
    "get_forecast",
    "fetch_current_city",
    "fetch_weather",
    "fetch_forecast",
    "fetch_current_city_that_fails",
    "fetch_current_city_indecisive",
    "fetch_current_city_repeated_failures",
]

DEFAULT_CITY = "New York, NY"
DEFAULT_DELAY_MS = 1

Callback = Callable[..., None]


def _sched(scheduler: Scheduler | None) -> Scheduler:
    return scheduler or default_scheduler()


# --------------------------------------------------------------------------- #
# Legacy callback-style services
# --------------------------------------------------------------------------- #

def get_current_city(
    callback: Callback,
    *,
    city: str = DEFAULT_CITY,
    scheduler: Scheduler | None = None,
    delay_ms: float = DEFAULT_DELAY_MS,
) -> None:
    _sched(scheduler).call_later(delay_ms, callback, None, city)


def get_weather(
    city: str | None,
    callback: Callback,
    *,
    scheduler: Scheduler | None = None,
    delay_ms: float = DEFAULT_DELAY_MS,
) -> None:
    log.info("Getting weather")

    def _done() -> None:
        if not city:
            callback(CityRequiredError("City required to get weather"))
            return
        weather: Dict[str, Any] = {"temp": 50}
        callback(None, weather)

    _sched(scheduler).call_later(delay_ms, _done)


def get_forecast(
    city: str | None,
    callback: Callback,
    *,
    scheduler: Scheduler | None = None,
    delay_ms: float = DEFAULT_DELAY_MS,
) -> None:
    log.info("Getting forecast")

    def _done() -> None:
        if not city:
            callback(CityRequiredError("City required to get forecast"))
            return
        five_day: Dict[str, List[int]] = {"five_day": [60, 70, 80, 45, 50]}
        callback(None, five_day)

    _sched(scheduler).call_later(delay_ms, _done)


# --------------------------------------------------------------------------- #
# Operation-returning wrappers
# --------------------------------------------------------------------------- #

def fetch_current_city(**kwargs: Any) -> Operation:
    return from_callback(get_current_city, op_name="current_city", **kwargs)


def fetch_weather(city: str | None = None, **kwargs: Any) -> Operation:
    return from_callback(get_weather, city, op_name="weather", **kwargs)


def fetch_forecast(city: str | None = None, **kwargs: Any) -> Operation:
    return from_callback(get_forecast, city, op_name="forecast", **kwargs)


# --------------------------------------------------------------------------- #
# Misbehaving producers
# --------------------------------------------------------------------------- #

def fetch_current_city_that_fails(*, scheduler: Scheduler | None = None) -> Operation:
    op = Operation(name="current_city")
    _sched(scheduler).call_later(DEFAULT_DELAY_MS, op.fail, "GPS broken")
    return op


def fetch_current_city_indecisive(*, scheduler: Scheduler | None = None) -> Operation:
    op = Operation(name="current_city")

    def _waver() -> None:
        op.succeed("NYC")
        op.succeed("Philly")

    _sched(scheduler).call_later(DEFAULT_DELAY_MS, _waver)
    return op


def fetch_current_city_repeated_failures(*, scheduler: Scheduler | None = None) -> Operation:
    op = Operation(name="current_city")

    def _flail() -> None:
        op.fail(RuntimeError("I failed"))
        op.fail(RuntimeError("I failed again!"))

    _sched(scheduler).call_later(DEFAULT_DELAY_MS, _flail)
    return op
