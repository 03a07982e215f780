from __future__ import annotations

"""Operation – a single-assignment deferred result with safe chaining.

An Operation starts *pending* and settles exactly once, either succeeding with
a result or failing with an error. Consumers register reactions through
:meth:`Operation.on_completion`, which always hands back a new dependent
Operation so work composes linearly instead of nesting callbacks::

    fetch_current_city() \
        .then(fetch_weather) \
        .then(lambda weather: print(weather["temp"])) \
        .catch(lambda err: print("no weather:", err))

Producers settle an operation with :meth:`succeed`, :meth:`fail` or the
legacy ``(error, result)`` style :meth:`completion_callback`. Only the first
settlement counts; later calls are ignored.
"""

from collections import deque
from typing import Any, Callable, Deque, List, Optional, Tuple

from .chainable import Chainable, Reaction
from .result import OperationState, Outcome
from operette.errors import ChainingCycleError
from operette.utils.events import publish, OperationSettled, HandlerFailed
from operette.utils.ids import new_op_id
from operette.utils.logging import log

__all__ = ["Operation", "OperationState"]

# --------------------------------------------------------------------------- #
# Reaction dispatch
# --------------------------------------------------------------------------- #
# Reactions queue here; the outermost succeed/fail drains them in a loop, so
# stack depth stays flat for chains of any length.
_QUEUE: Deque[Tuple[Callable[[Any], None], Any]] = deque()
_draining = False


def _dispatch(reactions: List[Callable[[Any], None]], payload: Any) -> None:
    global _draining
    _QUEUE.extend((reaction, payload) for reaction in reactions)
    if _draining:
        return
    _draining = True
    try:
        while _QUEUE:
            reaction, arg = _QUEUE.popleft()
            reaction(arg)
    except BaseException:
        _QUEUE.clear()
        raise
    finally:
        _draining = False


class Operation:
    """Eventual outcome of an asynchronous action.

    Attributes:
        state: ``PENDING`` until settled, then ``SUCCEEDED`` or ``FAILED``.
        result: the success value (``None`` unless succeeded).
        error: the failure value (``None`` unless failed).
        settled: guard flipped by the first settlement.
        success_reactions / error_reactions: callbacks waiting for settlement.
        children: dependent operations created by :meth:`on_completion`, kept
            for tree rendering. Every registration appends one and the list is
            never trimmed, so it grows without bound on a long-lived operation
            that keeps receiving registrations.

    Reactions run in registration order. When a reaction settles another
    operation, that operation's reactions are queued behind the ones already
    pending and run before the outermost ``succeed`` / ``fail`` returns.
    """

    def __init__(self, name: str | None = None):
        self.id = new_op_id()
        self.name = name
        self.state = OperationState.PENDING
        self.result: Any = None
        self.error: Any = None
        self.settled = False
        self.success_reactions: List[Callable[[Any], None]] = []
        self.error_reactions: List[Callable[[Any], None]] = []
        self.parent: Optional["Operation"] = None
        self.children: List["Operation"] = []

    # ------------------------------------------------------------------ #
    # Constructors
    # ------------------------------------------------------------------ #
    @classmethod
    def succeeded(cls, value: Any, name: str | None = None) -> "Operation":
        op = cls(name=name)
        op.succeed(value)
        return op

    @classmethod
    def failed(cls, error: Any, name: str | None = None) -> "Operation":
        op = cls(name=name)
        op.fail(error)
        return op

    # ------------------------------------------------------------------ #
    # Settlement
    # ------------------------------------------------------------------ #
    def succeed(self, result: Any = None) -> None:
        """Settle successfully with *result* and fire the success reactions."""
        reactions = self._settle(OperationState.SUCCEEDED, result=result)
        if reactions is not None:
            _dispatch(reactions, result)

    def fail(self, error: Any) -> None:
        """Settle as failed with *error* and fire the error reactions."""
        reactions = self._settle(OperationState.FAILED, error=error)
        if reactions is not None:
            _dispatch(reactions, error)

    def _settle(self, state: OperationState, result: Any = None, error: Any = None):
        # Returns the reactions to fire, or None when already settled.
        if self.settled:
            log.debug("%s: ignoring %s, already %s", self.id, state.value, self.state.value)
            return None
        self.settled = True
        self.state = state
        if state is OperationState.SUCCEEDED:
            self.result = result
            reactions = self.success_reactions
        else:
            self.error = error
            reactions = self.error_reactions
        # Snapshot then clear: anything registered from inside a reaction
        # sees a settled operation and fires immediately instead.
        self.success_reactions = []
        self.error_reactions = []
        publish(OperationSettled(op_id=self.id, state=state.value))
        return reactions

    def resolve(self, value: Any = None) -> None:
        """Settle with *value*, flattening nested deferred values.

        When *value* is :class:`Chainable` this operation adopts its eventual
        outcome; otherwise it is the same as :meth:`succeed`.
        """
        if value is self:
            self.fail(ChainingCycleError(f"operation {self.id} resolved with itself"))
            return
        if isinstance(value, Chainable):
            try:
                value.on_completion(self.succeed, self.fail)
            except Exception as exc:  # noqa: BLE001
                self.fail(exc)
            return
        self.succeed(value)

    def completion_callback(self, error: Any = None, result: Any = None) -> None:
        """Bridge for ``callback(error, result)`` style producers."""
        if error:
            self.fail(error)
            return
        self.succeed(result)

    # ------------------------------------------------------------------ #
    # Chaining
    # ------------------------------------------------------------------ #
    def on_completion(
        self,
        on_success: Optional[Reaction] = None,
        on_error: Optional[Reaction] = None,
    ) -> "Operation":
        """Register reactions and return the dependent operation.

        The child resolves with whatever the matching handler returns (a
        nested operation is flattened), fails with whatever it raises, and
        takes over the parent's outcome unchanged when that handler is
        omitted.
        """
        child = Operation()
        child.parent = self
        self.children.append(child)

        def success_handler(result: Any) -> None:
            if on_success is None:
                child.succeed(result)
                return
            try:
                returned = on_success(result)
            except Exception as exc:  # noqa: BLE001
                self._handler_failed(child, exc)
                return
            child.resolve(returned)

        def error_handler(error: Any) -> None:
            if on_error is None:
                child.fail(error)
                return
            try:
                returned = on_error(error)
            except Exception as exc:  # noqa: BLE001
                self._handler_failed(child, exc)
                return
            child.resolve(returned)

        if self.state is OperationState.SUCCEEDED:
            success_handler(self.result)
        elif self.state is OperationState.FAILED:
            error_handler(self.error)
        else:
            self.success_reactions.append(success_handler)
            self.error_reactions.append(error_handler)

        return child

    then = on_completion

    def on_failure(self, on_error: Reaction) -> "Operation":
        """Shorthand for ``on_completion(None, on_error)``."""
        return self.on_completion(None, on_error)

    catch = on_failure

    @staticmethod
    def _handler_failed(child: "Operation", exc: Exception) -> None:
        log.debug("%s: handler raised %r", child.id, exc)
        publish(HandlerFailed(op_id=child.id, error=exc))
        child.fail(exc)

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #
    def outcome(self) -> Outcome:
        """Return an immutable snapshot of the current state."""
        return Outcome(state=self.state, value=self.result, error=self.error)

    @property
    def label(self) -> str:
        return self.name or self.id

    def __repr__(self) -> str:
        if self.state is OperationState.SUCCEEDED:
            detail = f" result={self.result!r}"
        elif self.state is OperationState.FAILED:
            detail = f" error={self.error!r}"
        else:
            detail = ""
        return f"<Operation {self.label} {self.state.value}{detail}>"
