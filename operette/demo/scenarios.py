from __future__ import annotations

"""End-to-end chaining scenarios driven by the demo producers.

Each scenario builds a chain on a private scheduler and returns the last
operation of that chain; the scenario passes when that operation succeeds.
Used by ``operette scenarios`` and by the test-suite.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from operette.config import OperetteConfig
from operette.core.operation import Operation
from operette.core.result import Outcome
from operette.demo.producers import (
    fetch_current_city,
    fetch_current_city_indecisive,
    fetch_current_city_repeated_failures,
    fetch_current_city_that_fails,
    fetch_forecast,
    fetch_weather,
)
from operette.scheduler import Scheduler

__all__ = ["SCENARIOS", "ScenarioRun", "run_scenario", "run_all"]

ScenarioFn = Callable[[Scheduler, OperetteConfig], Operation]
SCENARIOS: Dict[str, ScenarioFn] = {}


def scenario(name: str):  # noqa: D401
    """Decorator: register a scenario under *name*."""

    def _decorator(func: ScenarioFn) -> ScenarioFn:
        SCENARIOS[name] = func
        return func

    return _decorator


def _expect(actual: Any, expected: Any) -> Any:
    if actual != expected:
        raise ValueError(f"expected {expected!r}, got {actual!r}")
    return actual


# --------------------------------------------------------------------------- #
# Scenarios
# --------------------------------------------------------------------------- #

@scenario("transform")
def _transform(sched: Scheduler, cfg: OperetteConfig) -> Operation:
    op = Operation(name="value")
    sched.call_later(cfg.delay_ms, op.succeed, "X")
    return op.then(lambda v: v + "Y").then(lambda v: _expect(v, "XY"))


@scenario("recovery")
def _recovery(sched: Scheduler, cfg: OperetteConfig) -> Operation:
    op = Operation(name="value")
    sched.call_later(cfg.delay_ms, op.fail, "boom")
    return op.catch(lambda e: "recovered").then(lambda v: _expect(v, "recovered"))


@scenario("handler raises")
def _handler_raises(sched: Scheduler, cfg: OperetteConfig) -> Operation:
    def _bad(_):
        raise ValueError("bad")

    return (
        fetch_current_city(scheduler=sched, delay_ms=cfg.delay_ms, city=cfg.city)
        .then(_bad)
        .catch(lambda e: _expect(str(e), "bad"))
    )


@scenario("recovery bypassed")
def _recovery_bypassed(sched: Scheduler, cfg: OperetteConfig) -> Operation:
    return (
        fetch_current_city(scheduler=sched, delay_ms=cfg.delay_ms, city=cfg.city)
        .catch(lambda e: "default city")
        .then(lambda city: _expect(city, cfg.city))
    )


@scenario("recover then fetch")
def _recover_then_fetch(sched: Scheduler, cfg: OperetteConfig) -> Operation:
    return (
        fetch_current_city_that_fails(scheduler=sched)
        .catch(lambda e: "default city")
        .then(lambda city: fetch_weather(city, scheduler=sched, delay_ms=cfg.delay_ms))
        .then(lambda weather: _expect(weather, {"temp": 50}))
    )


@scenario("flatten nested")
def _flatten(sched: Scheduler, cfg: OperetteConfig) -> Operation:
    return (
        fetch_current_city(scheduler=sched, delay_ms=cfg.delay_ms, city=cfg.city)
        .then(lambda city: fetch_weather(city, scheduler=sched, delay_ms=cfg.delay_ms))
        .then(lambda weather: _expect(weather["temp"], 50))
    )


@scenario("error fall through")
def _fall_through(sched: Scheduler, cfg: OperetteConfig) -> Operation:
    # weather is requested without a city, so the nested fetch fails
    return (
        fetch_current_city(scheduler=sched, delay_ms=cfg.delay_ms, city=cfg.city)
        .then(lambda city: fetch_weather(None, scheduler=sched, delay_ms=cfg.delay_ms))
        .then(lambda weather: "unreachable")
        .catch(lambda e: _expect(str(e), "City required to get weather"))
    )


@scenario("error in error handler")
def _error_in_error_handler(sched: Scheduler, cfg: OperetteConfig) -> Operation:
    def _oh_noes(_):
        raise RuntimeError("Oh noes")

    def _worse(_):
        raise RuntimeError("Error from an error handler, ohhh my!")

    return (
        fetch_current_city(scheduler=sched, delay_ms=cfg.delay_ms, city=cfg.city)
        .then(_oh_noes)
        .catch(_worse)
        .catch(lambda e: _expect(str(e), "Error from an error handler, ohhh my!"))
    )


@scenario("double success ignored")
def _double_success(sched: Scheduler, cfg: OperetteConfig) -> Operation:
    seen: List[str] = []
    op = fetch_current_city_indecisive(scheduler=sched)
    op.then(seen.append)
    return op.then(lambda city: _expect((city, seen), ("NYC", ["NYC"])))


@scenario("double failure ignored")
def _double_failure(sched: Scheduler, cfg: OperetteConfig) -> Operation:
    return fetch_current_city_repeated_failures(scheduler=sched).catch(
        lambda e: _expect(str(e), "I failed")
    )


@scenario("lexical parallelism")
def _parallel(sched: Scheduler, cfg: OperetteConfig) -> Operation:
    city = cfg.city
    weather_op = fetch_weather(city, scheduler=sched, delay_ms=cfg.delay_ms)
    forecast_op = fetch_forecast(city, scheduler=sched, delay_ms=cfg.delay_ms)

    def _combine(weather):
        return forecast_op.then(
            lambda forecast: f"It's currently {weather['temp']} in {city} "
            f"with a five day forecast of {forecast['five_day']}"
        )

    return weather_op.then(_combine)


# --------------------------------------------------------------------------- #
# Runner
# --------------------------------------------------------------------------- #

@dataclass(slots=True)
class ScenarioRun:  # noqa: D101
    name: str
    outcome: Outcome

    @property
    def passed(self) -> bool:
        return self.outcome.ok


def run_scenario(name: str, config: OperetteConfig | None = None) -> ScenarioRun:  # noqa: D401
    """Build scenario *name* on a fresh scheduler and drain it."""
    cfg = config or OperetteConfig()
    sched = Scheduler()
    final = SCENARIOS[name](sched, cfg)
    sched.run_until_idle()
    return ScenarioRun(name=name, outcome=final.outcome())


def run_all(config: OperetteConfig | None = None) -> List[ScenarioRun]:  # noqa: D401
    return [run_scenario(name, config) for name in SCENARIOS]
