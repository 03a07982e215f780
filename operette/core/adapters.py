from __future__ import annotations

"""Adapters turning legacy ``callback(error, result)`` producers into Operations.

    >>> fetch_weather = operation_producer(get_weather)
    >>> fetch_weather("NYC").then(print)
"""

import functools
from typing import Any, Callable

from .operation import Operation

__all__ = ["from_callback", "operation_producer"]


def from_callback(
    func: Callable[..., Any],
    *args: Any,
    op_name: str | None = None,
    **kwargs: Any,
) -> Operation:  # noqa: D401
    """Call *func* with the completion adapter appended and return the Operation.

    *func* receives ``op.completion_callback`` as its last positional
    argument, plus the remaining *kwargs*. *op_name* labels the Operation
    (defaults to the function name) and is not forwarded. An exception raised
    synchronously while starting the action fails the operation instead of
    escaping.
    """
    op = Operation(name=op_name or getattr(func, "__name__", None))
    try:
        func(*args, op.completion_callback, **kwargs)
    except Exception as exc:  # noqa: BLE001
        op.fail(exc)
    return op


def operation_producer(func: Callable[..., Any]) -> Callable[..., Operation]:  # noqa: D401
    """Decorator form of :func:`from_callback`."""

    @functools.wraps(func)
    def _wrapper(*args: Any, **kwargs: Any) -> Operation:
        return from_callback(func, *args, **kwargs)

    return _wrapper
