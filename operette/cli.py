from __future__ import annotations

"""operette Command Line Interface."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from operette.config import OperetteConfig, load_config
from operette.demo.producers import fetch_current_city, fetch_forecast, fetch_weather
from operette.demo.scenarios import run_all
from operette.errors import ConfigError
from operette.scheduler import Scheduler
from operette.utils.constants import SYMBOLS
from operette.utils.logging import console, setup
from operette.utils.tree import build_rich_tree

app = typer.Typer(
    name="operette",
    help="CLI for operette: chainable deferred results.",
    add_completion=False,
)


def _load(config: Optional[Path]) -> OperetteConfig:
    try:
        cfg = load_config(config)
    except ConfigError as e:
        console.print(f"[bold red]Error: {e}[/]")
        raise typer.Exit(code=1)
    setup(cfg.log_level)
    return cfg


@app.command()
def demo(
    city: Optional[str] = typer.Option(None, "--city", help="Override the city reported by the GPS stub."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file."),
    tree: bool = typer.Option(False, "--tree", help="Render the operation chain after it settles."),
):
    """Look up the current city, then its weather and five-day forecast."""
    cfg = _load(config)
    if city is not None:
        cfg = cfg.model_copy(update={"city": city})

    sched = Scheduler()
    kw = {"scheduler": sched, "delay_ms": cfg.delay_ms}

    root = fetch_current_city(city=cfg.city, **kw)

    def _report(found_city):
        weather_op = fetch_weather(found_city, **kw)
        forecast_op = fetch_forecast(found_city, **kw)
        return weather_op.then(
            lambda weather: forecast_op.then(
                lambda forecast: (
                    f"It's currently {weather['temp']} in {found_city} "
                    f"with a five day forecast of {forecast['five_day']}"
                )
            )
        )

    final = root.then(_report)
    sched.run_until_idle()

    if tree:
        console.print(build_rich_tree(root))

    outcome = final.outcome()
    if not outcome.ok:
        console.print(f"{SYMBOLS['failed']}[red]{escape(str(outcome.error))}[/]", soft_wrap=True)
        raise typer.Exit(code=1)
    console.print(f"{SYMBOLS['succeeded']}{escape(str(outcome.value))}", soft_wrap=True)


@app.command()
def scenarios(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file."),
):
    """Run the built-in chaining scenarios and report their outcomes."""
    cfg = _load(config)
    runs = run_all(cfg)

    table = Table(title="Operation scenarios")
    table.add_column("Scenario", style="cyan", no_wrap=True)
    table.add_column("Outcome")
    table.add_column("Value / error", style="dim")

    for run in runs:
        outcome = run.outcome
        detail = outcome.value if outcome.ok else outcome.error
        table.add_row(run.name, SYMBOLS[outcome.state.value] + outcome.state.value, escape(repr(detail)))
    console.print(table)

    failed = [r.name for r in runs if not r.passed]
    if failed:
        console.print(f"[bold red]{len(failed)} scenario(s) failed: {', '.join(failed)}[/]")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
