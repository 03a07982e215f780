from __future__ import annotations
"""Ultra-lightweight pub/sub **EventBus** for operation lifecycle hooks.

Example
-------
```python
from operette.utils.events import subscribe, OperationSettled

@subscribe(OperationSettled)
def _on_settled(evt: OperationSettled):
    print(f"{evt.op_id} -> {evt.state}")
```
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Type, TypeVar

__all__ = [
    "Event",
    "OperationSettled",
    "HandlerFailed",
    "subscribe",
    "unsubscribe",
    "publish",
]

T = TypeVar("T", bound="Event")
_Handler = Callable[[Any], None]
_REGISTRY: Dict[Type["Event"], List[_Handler]] = {}


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True, kw_only=True)
class Event:  # noqa: D101 – base event
    ts: datetime = field(default_factory=_now)


# --------------------------------------------------------------------------- #
# Concrete events
# --------------------------------------------------------------------------- #
@dataclass(slots=True)
class OperationSettled(Event):
    op_id: str
    state: str  # "succeeded" | "failed"


@dataclass(slots=True)
class HandlerFailed(Event):
    op_id: str  # the child operation the exception was routed to
    error: BaseException


# --------------------------------------------------------------------------- #
# API helpers
# --------------------------------------------------------------------------- #

def subscribe(event_type: Type[T]):  # noqa: D401
    """Decorator: register *func* to receive *event_type* events."""

    def _decorator(func: _Handler) -> _Handler:
        _REGISTRY.setdefault(event_type, []).append(func)
        return func

    return _decorator


def unsubscribe(event_type: Type[T], func: _Handler) -> None:
    handlers = _REGISTRY.get(event_type, [])
    if func in handlers:
        handlers.remove(func)


def publish(evt: Event) -> None:  # noqa: D401
    """Publish an event to all registered subscribers."""
    for func in list(_REGISTRY.get(type(evt), [])):
        try:
            func(evt)
        except Exception as e:  # noqa: BLE001
            # A broken subscriber must never break settlement.
            from operette.utils.logging import log

            log.warning("event handler %s failed: %s", getattr(func, "__name__", func), e)
