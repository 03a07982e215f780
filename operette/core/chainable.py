from __future__ import annotations

"""Chainable – the capability `Operation.resolve` looks for when flattening.

Anything exposing ``on_completion(on_success, on_error)`` counts as a nested
deferred value, whether it is an :class:`~operette.core.operation.Operation`
or a foreign type that speaks the same protocol.
"""
from typing import Any, Callable, Optional, Protocol, runtime_checkable

__all__ = ["Chainable", "Reaction"]

Reaction = Callable[[Any], Any]


@runtime_checkable
class Chainable(Protocol):  # noqa: D101
    def on_completion(
        self,
        on_success: Optional[Reaction] = None,
        on_error: Optional[Reaction] = None,
    ) -> Any:
        ...
