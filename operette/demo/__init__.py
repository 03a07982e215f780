"""Example producers built on top of the Operation primitive."""

from .producers import (
    fetch_current_city,
    fetch_forecast,
    fetch_weather,
    get_current_city,
    get_forecast,
    get_weather,
)

__all__ = [
    "fetch_current_city",
    "fetch_forecast",
    "fetch_weather",
    "get_current_city",
    "get_forecast",
    "get_weather",
]
