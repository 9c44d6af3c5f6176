# topmark:header:start
#
#   project      : DiffStyle
#   file         : getters.py
#   file_relpath : src/diffstyle/config/getters.py
#   license      : MIT
#   copyright    : (c) 2025 DiffStyle contributors
#
# topmark:header:end

"""Value coercion helpers for raw config and command-line values.

Every helper takes a raw value (as found in a parsed TOML table, or as typed on
the command line) and returns the coerced value, or ``None`` when the value is
absent or not coercible. Coercion failures only emit **debug** logs: an
unusable config value behaves exactly like a missing one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from diffstyle.config.logging import get_logger

if TYPE_CHECKING:
    from diffstyle.config.logging import DiffStyleLogger

logger: DiffStyleLogger = get_logger(__name__)

_TRUE_STRINGS: frozenset[str] = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS: frozenset[str] = frozenset({"false", "no", "off", "0"})


def coerce_string(value: Any | None) -> str | None:
    """Coerce a raw value to ``str``.

    If the value is a ``str``, it is returned as is. If the value is of type
    ``int``, ``float``, or ``bool``, it is coerced using ``str(...)``; a TOML
    entry such as ``meta = 11`` therefore reads as ``"11"``.

    Args:
        value (Any | None): Raw value.

    Returns:
        str | None: The string value, or ``None`` when absent or not coercible.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        # TOML booleans read back the way git config spells them
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    logger.debug("Cannot coerce %r to string, returning None", value)
    return None


def coerce_bool(value: Any | None) -> bool | None:
    """Coerce a raw value to ``bool``.

    Accepts booleans, integers (via ``bool(value)``) and the usual git config
    spellings (``true/yes/on/1``, ``false/no/off/0``, case-insensitive).

    Args:
        value (Any | None): Raw value.

    Returns:
        bool | None: The boolean value, or ``None`` when absent or not coercible.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str):
        v: str = value.strip().lower()
        if v in _TRUE_STRINGS:
            return True
        if v in _FALSE_STRINGS:
            return False
    logger.debug("Cannot coerce %r to bool, returning None", value)
    return None


def coerce_int(value: Any | None) -> int | None:
    """Coerce a raw value to ``int`` (booleans are rejected)."""
    if value is None:
        return None
    if isinstance(value, bool):
        logger.debug("Refusing to coerce bool %r to int", value)
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    logger.debug("Cannot coerce %r to int, returning None", value)
    return None


def coerce_uint(value: Any | None) -> int | None:
    """Coerce a raw value to a non-negative ``int``."""
    result: int | None = coerce_int(value)
    if result is not None and result < 0:
        logger.debug("Negative value %r for unsigned integer, returning None", value)
        return None
    return result


def coerce_float(value: Any | None) -> float | None:
    """Coerce a raw value to ``float`` (booleans are rejected)."""
    if value is None:
        return None
    if isinstance(value, bool):
        logger.debug("Refusing to coerce bool %r to float", value)
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    logger.debug("Cannot coerce %r to float, returning None", value)
    return None
