"""Accessors: callable views on registered cells"""

from types import MappingProxyType

from .context import active_cell_as
from .pipeline import pipe
from .registry import registry as default_registry


class _NoValue:
    def __repr__(self):
        return "NOVALUE"


NOVALUE = _NoValue()


class Accessor:
    """Callable view on a named cell.

``accessor()`` reads the value (through the get-pipeline, if any).
``accessor(func)`` updates the value with func(raw value), passed through the
set-pipeline, if any.
``accessor(value)`` writes value directly, bypassing both pipelines.

The same operations are available as ``read()``, ``update(func)`` and
``write(value)``. The cell's methods are available as read-only attributes,
and by name through ``methods`` or ``call_method``.

The accessor holds no state of its own: all operations look up the cell in
the registry.
"""

    __slots__ = ("_name", "_registry")

    def __init__(self, name, registry=None):
        if registry is None:
            registry = default_registry
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_registry", registry)

    @property
    def name(self):
        return self._name

    @property
    def cell(self):
        return self._registry.lookup(self._name)

    def read(self):
        cell = self.cell
        if cell.get_pipeline:
            return pipe(cell.get_pipeline)(cell.value)
        return cell.value

    def update(self, func):
        cell = self.cell
        result = func(cell.value)
        if cell.set_pipeline:
            result = pipe(cell.set_pipeline)(result)
        cell.value = result
        return result

    def write(self, value):
        cell = self.cell
        cell.value = value
        return value

    def __call__(self, arg=NOVALUE):
        if arg is NOVALUE:
            return self.read()
        if callable(arg):
            return self.update(arg)
        return self.write(arg)

    @property
    def methods(self):
        return MappingProxyType(self.cell.methods)

    def call_method(self, name, *args, **kwargs):
        try:
            method = self.cell.methods[name]
        except KeyError:
            raise AttributeError(f"{self} has no method '{name}'") from None
        return method(*args, **kwargs)

    def __getattr__(self, attr):
        if attr.startswith("__"):
            raise AttributeError(attr)
        try:
            return self.cell.methods[attr]
        except KeyError:
            raise AttributeError(f"{self} has no method '{attr}'") from None

    def __setattr__(self, attr, value):
        raise AttributeError(f"Cannot set attribute '{attr}' of {self}")

    def __delattr__(self, attr):
        raise AttributeError(f"Cannot delete attribute '{attr}' of {self}")

    def __dir__(self):
        return sorted(
            set(object.__dir__(self)) | set(self.cell.methods.keys())
        )

    def __str__(self):
        return "Accessor for cell " + repr(self._name)

    def __repr__(self):
        return "<" + str(self) + ">"


def value(name, initial_or_callback=NOVALUE, callback=None, *, registry=None):
    """Define a cell and return an accessor for it.

Parameters
----------
name: str
    name of the cell. An existing cell of the same name is replaced.

initial_or_callback:
    the initial value of the cell, or the definition callback if no
    initial value is given (the initial value is then None).

callback: callable or None
    definition callback, called without arguments while the new cell is the
    active cell. It can use get(), set() and method() to set up the cell.

See also defines(), for the decorator form.
"""
    if registry is None:
        registry = default_registry
    if callback is None:
        if initial_or_callback is NOVALUE:
            initial = None
        elif callable(initial_or_callback):
            initial, callback = None, initial_or_callback
        else:
            initial = initial_or_callback
    else:
        initial = initial_or_callback
        if initial is NOVALUE:
            initial = None
    cell = registry.define(name, initial)
    if callback is not None:
        with active_cell_as(cell):
            callback()
    return Accessor(name, registry)


def defines(name, initial=None, *, registry=None):
    """Decorator form of value().

The decorated function becomes the definition callback, and the accessor
takes its place:

    @defines("count", 0)
    def count():
        @method
        def inc():
            self().value += 1
            return val()
"""

    def decorator(func):
        return value(name, initial, func, registry=registry)

    return decorator


create_accessor = value
define_cell = value
