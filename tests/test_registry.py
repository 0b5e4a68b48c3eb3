import logging

import pytest

from valuecells import config
from valuecells.registry import Cell, CellRegistry, UnknownCellError


def test_define_and_lookup():
    reg = CellRegistry()
    cell = reg.define("a", 1)
    assert isinstance(cell, Cell)
    assert reg.lookup("a") is cell
    assert cell.value == 1
    assert cell.get_pipeline is None
    assert cell.set_pipeline is None
    assert cell.methods == {}
    assert "a" in reg
    assert len(reg) == 1
    assert list(reg) == ["a"]


def test_unknown_cell():
    reg = CellRegistry()
    with pytest.raises(UnknownCellError):
        reg.lookup("nope")
    # UnknownCellError is a KeyError
    with pytest.raises(KeyError):
        reg.lookup("nope")


def test_redefine_replaces_cell():
    reg = CellRegistry()
    old = reg.define("a", 1)
    old.add_get(str)
    old.methods["m"] = lambda: None
    new = reg.define("a", 2)
    assert new is not old
    assert reg.lookup("a") is new
    assert new.get_pipeline is None
    assert new.methods == {}
    assert len(reg) == 1


def test_name_must_be_str():
    reg = CellRegistry()
    with pytest.raises(TypeError):
        reg.define(1)


def test_clear():
    reg = CellRegistry()
    reg.define("a")
    reg.define("b")
    assert reg.names() == ["a", "b"]
    reg.clear()
    assert len(reg) == 0


def test_attribute_access():
    reg = CellRegistry()
    cell = reg.define("a")
    assert reg.a is cell
    with pytest.raises(AttributeError):
        reg.b


def test_redefine_warning(caplog):
    reg = CellRegistry()
    reg.define("a")
    config.set_warn_on_redefine(True)
    try:
        with caplog.at_level(logging.DEBUG, logger="valuecells.registry"):
            reg.define("a")
    finally:
        config.set_warn_on_redefine(False)
    records = [r for r in caplog.records if "Redefining" in r.getMessage()]
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING


def test_redefine_debug(caplog):
    reg = CellRegistry()
    reg.define("a")
    with caplog.at_level(logging.DEBUG, logger="valuecells.registry"):
        reg.define("a")
    records = [r for r in caplog.records if "Redefining" in r.getMessage()]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG


def test_default_registry_functions():
    from valuecells.registry import define, lookup, registry

    cell = define("x", 3)
    assert lookup("x") is cell
    assert registry.lookup("x") is cell


def test_registry_submodule_not_shadowed():
    import valuecells
    import valuecells.registry as registry_module

    assert registry_module.CellRegistry is CellRegistry
    assert isinstance(valuecells.default_registry, CellRegistry)
    assert valuecells.default_registry is registry_module.registry
