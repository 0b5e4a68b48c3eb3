"""valuecells configuration"""

import os
import logging

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


class ConfigurationError(Exception):
    """valuecells configuration error"""


_warn_on_redefine = False


def warn_on_redefine():
    """Return True if redefining an existing cell name emits a warning"""
    return _warn_on_redefine


def set_warn_on_redefine(flag):
    """Emit a warning (instead of a debug message)
    whenever a cell name is redefined."""
    global _warn_on_redefine
    _warn_on_redefine = bool(flag)


def _parse_bool_env(var):
    value = os.environ.get(var)
    if value is None:
        return None
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"environment variable {var} must be a boolean, not '{value}'"
    )


def init_from_env():
    """Configure valuecells based on environment variables

    - VALUECELLS_WARN_REDEFINE: see set_warn_on_redefine()
    """
    warn = _parse_bool_env("VALUECELLS_WARN_REDEFINE")
    if warn is not None:
        set_warn_on_redefine(warn)
        logger.debug(f"warn_on_redefine set to {warn} from environment")


init_from_env()
