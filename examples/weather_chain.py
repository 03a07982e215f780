"""Weather lookup without nested callbacks.

Run with ``python examples/weather_chain.py``.
"""
from operette.demo.producers import fetch_current_city, fetch_weather
from operette.scheduler import Scheduler
from operette.utils.logging import console, setup
from operette.utils.tree import build_rich_tree

setup("info")
sched = Scheduler()

city_op = fetch_current_city(scheduler=sched)
(
    city_op
    .then(lambda city: fetch_weather(city, scheduler=sched))
    .then(lambda weather: console.print(f"It's {weather['temp']} degrees"))
    .catch(lambda err: console.print(f"[red]lookup failed: {err}[/]"))
)

sched.run_until_idle()
console.print(build_rich_tree(city_op))
