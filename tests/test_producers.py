from operette import CityRequiredError, OperationState
from operette.demo.producers import (
    fetch_current_city,
    fetch_current_city_indecisive,
    fetch_current_city_repeated_failures,
    fetch_current_city_that_fails,
    fetch_forecast,
    fetch_weather,
    get_weather,
)
from operette.scheduler import Scheduler


def test_current_city_settles_after_delay():
    sched = Scheduler()
    op = fetch_current_city(scheduler=sched)
    assert op.state is OperationState.PENDING
    sched.run_until_idle()
    assert op.result == "New York, NY"
    assert sched.now_ms == 1


def test_current_city_uses_configured_city_and_delay():
    sched = Scheduler()
    op = fetch_current_city(scheduler=sched, city="Philly", delay_ms=7)
    sched.run_until_idle()
    assert op.result == "Philly"
    assert sched.now_ms == 7


def test_weather_and_forecast():
    sched = Scheduler()
    weather = fetch_weather("NYC", scheduler=sched)
    forecast = fetch_forecast("NYC", scheduler=sched)
    sched.run_until_idle()
    assert weather.result == {"temp": 50}
    assert forecast.result == {"five_day": [60, 70, 80, 45, 50]}


def test_weather_requires_city():
    sched = Scheduler()
    op = fetch_weather(scheduler=sched)
    sched.run_until_idle()
    assert isinstance(op.error, CityRequiredError)
    assert str(op.error) == "City required to get weather"


def test_forecast_requires_city():
    sched = Scheduler()
    op = fetch_forecast("", scheduler=sched)
    sched.run_until_idle()
    assert str(op.error) == "City required to get forecast"


def test_legacy_callback_style():
    sched = Scheduler()
    calls = []
    get_weather("NYC", lambda *args: calls.append(args), scheduler=sched)
    sched.run_until_idle()
    assert calls == [(None, {"temp": 50})]


def test_failing_producer():
    sched = Scheduler()
    op = fetch_current_city_that_fails(scheduler=sched)
    recovered = op.catch(lambda e: "default city")
    sched.run_until_idle()
    assert op.error == "GPS broken"
    assert recovered.result == "default city"


def test_indecisive_producer_settles_once():
    sched = Scheduler()
    calls = []
    op = fetch_current_city_indecisive(scheduler=sched)
    op.then(calls.append)
    sched.run_until_idle()
    assert calls == ["NYC"]


def test_repeated_failures_settle_once():
    sched = Scheduler()
    errors = []
    op = fetch_current_city_repeated_failures(scheduler=sched)
    op.catch(lambda e: errors.append(str(e)))
    sched.run_until_idle()
    assert errors == ["I failed"]


def test_register_callback_after_settlement():
    sched = Scheduler()
    op = fetch_weather(scheduler=sched)
    sched.run_until_idle()

    seen = []
    op.on_failure(seen.append)
    assert len(seen) == 1 and isinstance(seen[0], CityRequiredError)


def test_default_scheduler_is_used_when_none_given():
    from operette.scheduler import reset_default_scheduler

    sched = reset_default_scheduler()
    op = fetch_current_city()
    assert sched.pending == 1
    sched.run_until_idle()
    assert op.result == "New York, NY"
