"""Registry of named cells"""

import logging

from . import config

logger = logging.getLogger(__name__)


class UnknownCellError(KeyError):
    """Lookup of a cell name that was never defined"""


class Cell:
    """Named container for a value.

A cell holds a raw value, an optional get-pipeline (applied when the value is
read through an accessor), an optional set-pipeline (applied on functional
updates) and a table of methods.

Pipelines are None until the first transform is added.
"""

    def __init__(self, name, value=None):
        self.name = name
        self.value = value
        self.get_pipeline = None
        self.set_pipeline = None
        self.methods = {}

    def add_get(self, func):
        if self.get_pipeline is None:
            self.get_pipeline = []
        self.get_pipeline.append(func)

    def add_set(self, func):
        if self.set_pipeline is None:
            self.set_pipeline = []
        self.set_pipeline.append(func)

    def __str__(self):
        return "Cell " + repr(self.name)

    def __repr__(self):
        return "<{0} value={1!r}>".format(self, self.value)


class CellRegistry:
    """Mapping of cell names to cells.
    The registry is the sole owner of cell state."""

    def __init__(self):
        self._cells = {}

    def define(self, name, value=None):
        """Create a fresh cell under name, replacing any previous one"""
        if not isinstance(name, str):
            raise TypeError(type(name))
        if name in self._cells:
            msg = f"Redefining cell '{name}'"
            if config.warn_on_redefine():
                logger.warning(msg)
            else:
                logger.debug(msg)
        else:
            logger.debug(f"Defining cell '{name}'")
        cell = Cell(name, value)
        self._cells[name] = cell
        return cell

    def lookup(self, name):
        try:
            return self._cells[name]
        except KeyError:
            raise UnknownCellError(name) from None

    def names(self):
        return list(self._cells.keys())

    def clear(self):
        self._cells.clear()

    def __contains__(self, name):
        return name in self._cells

    def __len__(self):
        return len(self._cells)

    def __iter__(self):
        return iter(list(self._cells.keys()))

    def __getattr__(self, attr):
        if attr.startswith("_"):
            raise AttributeError(attr)
        try:
            return self.lookup(attr)
        except UnknownCellError:
            raise AttributeError(attr) from None

    def __str__(self):
        return "CellRegistry: " + str(self.names())


registry = CellRegistry()


def define(name, value=None):
    return registry.define(name, value)


def lookup(name):
    return registry.lookup(name)
