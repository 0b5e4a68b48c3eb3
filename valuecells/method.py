"""Binding of methods to cells"""

import functools
import logging

from .context import active_cell_as

logger = logging.getLogger(__name__)

# Attributes of Accessor; a method under one of these names would be shadowed
RESERVED_NAMES = (
    "read",
    "update",
    "write",
    "name",
    "cell",
    "methods",
    "call_method",
)


def bind_method(cell, name, body):
    """Bind body to cell and register it in the cell's method table.

Whenever the bound method is called, cell becomes the active cell for the
duration of the call. The previously active cell (if any) is restored
afterwards, also when body raises.
Returns the bound method.
"""
    if not isinstance(name, str):
        raise TypeError(type(name))
    if name in RESERVED_NAMES or name.startswith("_"):
        raise ValueError(
            f"{cell}: '{name}' cannot be used as a method name, "
            f"it is reserved by the accessor"
        )

    def bound_method(*args, **kwargs):
        with active_cell_as(cell):
            return body(*args, **kwargs)

    functools.update_wrapper(bound_method, body)
    bound_method.__name__ = name
    bound_method.cell = cell
    if name in cell.methods:
        logger.debug(f"{cell}: replacing method '{name}'")
    else:
        logger.debug(f"{cell}: registering method '{name}'")
    cell.methods[name] = bound_method
    return bound_method
