# pylint: disable=wrong-import-position, redefined-builtin
"""valuecells: named value cells with read/write pipelines and bound methods

# The MIT License (MIT)

# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:

# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.

# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
"""

__version__ = "0.1"

import logging

logger = logging.getLogger(__name__)

from . import config
from .config import ConfigurationError
from .pipeline import pipe
from .context import (
    NoActiveCellError,
    current_cell,
    get_active_cell,
    active_cell_as,
    with_cell,
)
from .registry import Cell, CellRegistry, UnknownCellError
from .registry import registry as default_registry
from .accessor import Accessor, value, defines, create_accessor, define_cell
from .helpers import val, self, get, set, method

__all__ = [
    "value",
    "create_accessor",
    "define_cell",
    "defines",
    "val",
    "self",
    "get",
    "set",
    "method",
    "pipe",
    "Accessor",
    "Cell",
    "CellRegistry",
    "default_registry",
    "current_cell",
    "get_active_cell",
    "active_cell_as",
    "with_cell",
    "NoActiveCellError",
    "UnknownCellError",
    "ConfigurationError",
    "config",
]
