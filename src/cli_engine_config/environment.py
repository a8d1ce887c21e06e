"""Recognized environment variables.

Contents
--------
* :func:`read_environment` – interprets the variables below from a snapshot
* :func:`resolve_update_disabled` – turns the update-disabled variable into a message

Variables
---------
* ``CLI_ENGINE_DEBUG`` – integer debug level
* ``CLI_ENGINE_SKIP_ANALYTICS`` – ``"1"`` opts out of analytics
* ``TESTING`` – ``"1"`` or ``"true"`` marks a test run (analytics off)
* ``CLI_ENGINE_UPDATE_DISABLED`` – disables self-update, optionally with a message
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .models import EnvironmentSettings

logger = logging.getLogger(__name__)

_ENV_PREFIX = "CLI_ENGINE_"
DEBUG_VAR = f"{_ENV_PREFIX}DEBUG"
SKIP_ANALYTICS_VAR = f"{_ENV_PREFIX}SKIP_ANALYTICS"
UPDATE_DISABLED_VAR = f"{_ENV_PREFIX}UPDATE_DISABLED"
TESTING_VAR = "TESTING"

_TESTING_VALUES = frozenset({"1", "true"})


def resolve_update_disabled(value: str | None, bin: str) -> str | None:
    """Interpret the update-disabled variable.

    Args:
        value: Raw variable value, or None when unset.
        bin: Executable name used in the canned message.

    Returns:
        None when unset, a canned hint for ``"1"``, otherwise ``value``.

    Example:
        >>> resolve_update_disabled("1", "mycli")
        'update with mycli update'
        >>> resolve_update_disabled("npm update -g mycli", "mycli")
        'npm update -g mycli'
    """
    if value is None:
        return None
    if value == "1":
        return f"update with {bin} update"
    return value


def _parse_debug(value: str | None) -> int:
    if not value:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", DEBUG_VAR, value)
        return 0


def read_environment(env: Mapping[str, str], *, bin: str) -> EnvironmentSettings:
    """Read the recognized variables from an environment snapshot.

    Args:
        env: Environment mapping, read once.
        bin: Executable name for the update-disabled message.

    Returns:
        Interpreted environment settings.
    """
    return EnvironmentSettings(
        debug=_parse_debug(env.get(DEBUG_VAR)),
        skip_analytics=env.get(SKIP_ANALYTICS_VAR) == "1",
        testing=env.get(TESTING_VAR) in _TESTING_VALUES,
        update_disabled=resolve_update_disabled(env.get(UPDATE_DISABLED_VAR), bin),
    )


__all__ = [
    "DEBUG_VAR",
    "SKIP_ANALYTICS_VAR",
    "TESTING_VAR",
    "UPDATE_DISABLED_VAR",
    "read_environment",
    "resolve_update_disabled",
]
