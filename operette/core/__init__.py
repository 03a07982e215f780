"""Core primitive: Operation and its helpers."""

from .chainable import Chainable
from .result import OperationState, Outcome
from .operation import Operation
from .adapters import from_callback, operation_producer

__all__ = [
    "Chainable",
    "Operation",
    "OperationState",
    "Outcome",
    "from_callback",
    "operation_producer",
]
