import pytest

from valuecells import context
from valuecells.registry import registry


@pytest.fixture(autouse=True)
def clean_registry():
    registry.clear()
    yield registry
    assert context.scope_depth() == 0, "ambient cell scope leaked out of test"
    registry.clear()
