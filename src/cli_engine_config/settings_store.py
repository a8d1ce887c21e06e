"""Persisted per-user settings document.

Purpose
-------
Read and write the small JSON document that keeps ``skipAnalytics`` and the
install identifier across runs. Reading never fails: a missing file is an
empty document, and unreadable or malformed files are treated the same way.
Writing reports failure through :class:`SettingsWriteError` so the caller
can decide what an unpersisted value means.

Contents
--------
* :class:`SettingsStore` – protocol implemented by every store
* :class:`JsonSettingsStore` – store backed by a JSON file
* :class:`SettingsWriteError` – raised when a document cannot be written
* :func:`normalize_settings` – validates whatever a store returned
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError

from .schemas import UserSettingsSchema

logger = logging.getLogger(__name__)

_KNOWN_KEYS = {"skipAnalytics": "skip_analytics", "install": "install"}


class SettingsWriteError(OSError):
    """The settings document could not be written."""


class SettingsStore(Protocol):
    """Read/write access to the user settings document."""

    def read(self) -> object:
        """Return the raw stored document (``{}`` when there is none)."""
        ...

    def write(self, document: Mapping[str, Any]) -> None:
        """Replace the stored document, raising :class:`SettingsWriteError` on failure."""
        ...


class JsonSettingsStore:
    """Settings store backed by a JSON file at a fixed path."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"JsonSettingsStore(path={str(self.path)!r})"

    def read(self) -> object:
        """Load the JSON document.

        Returns:
            The parsed document, or ``{}`` when the file is missing,
            unreadable or not valid JSON.
        """
        try:
            with self.path.open(encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError:
            logger.debug("No user settings at %s", self.path)
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable user settings %s: %s", self.path, exc)
            return {}

    def write(self, document: Mapping[str, Any]) -> None:
        """Write ``document`` as indented JSON, creating parent directories.

        Raises:
            SettingsWriteError: If the directory or file cannot be written or
                the document is not JSON serializable.
        """
        try:
            payload = json.dumps(dict(document), indent=2)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                f.write(payload + "\n")
        except (OSError, TypeError, ValueError) as exc:
            raise SettingsWriteError(f"Cannot write user settings to {self.path}: {exc}") from exc

        logger.debug("Wrote user settings to %s", self.path)


def normalize_settings(raw: object) -> dict[str, Any]:
    """Validate a raw settings document.

    Non-mapping documents are replaced by an empty document. Each recognized
    key is validated on its own: a wrongly typed key is dropped while the
    other keys, including unknown ones, are kept as they are.

    Args:
        raw: Whatever the store returned.

    Returns:
        A plain dict holding at most ``skipAnalytics`` and ``install`` among
        the recognized keys.

    Example:
        >>> normalize_settings({"skipAnalytics": False, "install": "1234"})
        {'skipAnalytics': False, 'install': '1234'}
        >>> normalize_settings(None)
        {}
    """
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.warning("Ignoring user settings of type %s", type(raw).__name__)
        return {}

    document = {key: value for key, value in raw.items() if key not in _KNOWN_KEYS}
    for key, field in _KNOWN_KEYS.items():
        if key not in raw:
            continue
        try:
            parsed = UserSettingsSchema.model_validate({key: raw[key]})
        except ValidationError as exc:
            logger.warning("Ignoring invalid user setting %s: %s", key, exc)
            continue
        value = getattr(parsed, field)
        if value is not None:
            document[key] = value
    return document


__all__ = [
    "JsonSettingsStore",
    "SettingsStore",
    "SettingsWriteError",
    "normalize_settings",
]
