"""operette: tiny, chainable deferred results.

Main components:
* `Operation`: single-assignment outcome of an asynchronous action
* `Operation.on_completion` / `then`: chain work on that outcome
* `from_callback`: adapt ``callback(error, result)`` style producers
* `Scheduler`: single-threaded timer queue that drives producers
"""

# Version info
__version__ = "0.1.0"

# Core components
from operette.core.chainable import Chainable
from operette.core.operation import Operation
from operette.core.result import OperationState, Outcome
from operette.core.adapters import from_callback, operation_producer

from operette.scheduler import Scheduler, default_scheduler
from operette.config import OperetteConfig, load_config
from operette.errors import (
    OperetteError,
    OperationFailed,
    OperationPending,
    ChainingCycleError,
    CityRequiredError,
    ConfigError,
)

# Export all important symbols
__all__ = [
    # Core classes
    "Operation",
    "OperationState",
    "Outcome",
    "Chainable",
    "Scheduler",

    # Functions
    "from_callback",
    "operation_producer",
    "default_scheduler",
    "load_config",

    # Config classes
    "OperetteConfig",

    # Errors
    "OperetteError",
    "OperationFailed",
    "OperationPending",
    "ChainingCycleError",
    "CityRequiredError",
    "ConfigError",
]
