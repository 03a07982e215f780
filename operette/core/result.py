from __future__ import annotations
"""Immutable Outcome snapshot of an Operation.

Handy at the edges (tests, CLI) where a caller wants to look at where an
operation ended up without registering reactions.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from operette.errors import OperationFailed, OperationPending

T = TypeVar("T")

__all__ = ["OperationState", "Outcome"]


class OperationState(str, Enum):  # noqa: D101
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):  # noqa: D101
    state: OperationState = OperationState.PENDING
    value: Optional[T] = None
    error: Any = None

    # ------------------------------------------------------------------ #
    @property
    def ok(self) -> bool:  # noqa: D401
        """Return True when the operation succeeded."""
        return self.state is OperationState.SUCCEEDED

    @property
    def settled(self) -> bool:  # noqa: D401
        return self.state is not OperationState.PENDING

    # Convenience constructors ----------------------------------------- #
    @staticmethod
    def success(val: T) -> "Outcome[T]":  # noqa: D401
        return Outcome(state=OperationState.SUCCEEDED, value=val)

    @staticmethod
    def failure(err: Any) -> "Outcome[None]":  # noqa: D401
        return Outcome(state=OperationState.FAILED, error=err)

    # ------------------------------------------------------------------ #
    def unwrap(self) -> T:  # noqa: D401
        """Return *value*, or raise the stored failure.

        Non-exception failure values (``fail("GPS broken")``) are wrapped in
        :class:`OperationFailed`.
        """
        if self.state is OperationState.PENDING:
            raise OperationPending("operation has not settled yet")
        if self.state is OperationState.FAILED:
            if isinstance(self.error, BaseException):
                raise self.error
            raise OperationFailed(self.error)
        return self.value  # type: ignore[return-value]
