from __future__ import annotations

"""operette.utils.ids
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Operation ids show up in log lines, events and rendered chain trees, so they
are kept short.
"""

import itertools
import uuid

__all__ = ["new_op_id"]

_COUNTER = itertools.count(1)


def new_op_id() -> str:
    """Generate a unique operation id.

    Returns:
        A string in format 'op<sequence>-[first 6 chars of UUID]', e.g.
        ``op12-3fa2b1``. The sequence keeps ids readable in a single run.
    """
    unique_id = uuid.uuid4().hex[:6]
    return f"op{next(_COUNTER)}-{unique_id}"
