# This file makes the 'utils' directory a Python package.

"""operette utilities."""

from .ids import new_op_id

__all__ = [
    "new_op_id",
]
