"""Ambient cell context.

Helper functions such as val() and method() operate on "the cell currently
being defined". That cell is kept on a stack, so that a definition callback
can define another cell, and a bound method can call another bound method,
without losing track of the outer cell.
"""

from contextlib import contextmanager

_active_cells = []


class NoActiveCellError(RuntimeError):
    """A cell-scoped helper was used outside any cell definition or method"""


def get_active_cell():
    """Return the active cell, or None if there is none"""
    if not len(_active_cells):
        return None
    return _active_cells[-1]


def current_cell():
    """Return the active cell.

    Raises NoActiveCellError outside a definition callback or bound method."""
    cell = get_active_cell()
    if cell is None:
        raise NoActiveCellError(
            "No active cell: cell helpers can only be used inside a value "
            "definition or a cell method"
        )
    return cell


def scope_depth():
    return len(_active_cells)


@contextmanager
def active_cell_as(cell):
    depth = len(_active_cells)
    _active_cells.append(cell)
    try:
        yield cell
    finally:
        # Drops anything the body left on the stack as well
        del _active_cells[depth:]


def with_cell(cell, body, *args, **kwargs):
    """Run body with cell as the active cell, and return its result"""
    with active_cell_as(cell):
        return body(*args, **kwargs)
