"""Helpers that operate on the active cell.

These can only be used inside a value() definition callback or inside a cell
method; elsewhere they raise NoActiveCellError.
"""

# pylint: disable=redefined-builtin

from .context import current_cell
from .method import bind_method


def val():
    """Return the raw value of the active cell"""
    return current_cell().value


def self():
    """Return the active cell"""
    return current_cell()


def get(func):
    """Add func to the get-pipeline of the active cell"""
    current_cell().add_get(func)
    return func


def set(func):
    """Add func to the set-pipeline of the active cell"""
    current_cell().add_set(func)
    return func


def method(name, body=None):
    """Define a method on the active cell.

Returns the bound method, which operates on the active cell even when it is
called later from elsewhere.
Can also be used as a decorator, as ``@method`` or ``@method("name")``.
"""
    if callable(name):
        body = name
        name = body.__name__
    cell = current_cell()
    if body is None:

        def decorator(func):
            return bind_method(cell, name, func)

        return decorator
    return bind_method(cell, name, body)
