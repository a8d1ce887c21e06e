"""Anonymous installation identifier for usage analytics.

Purpose
-------
Decide whether an install identifier is exposed, reused from the settings
document, freshly generated, or withheld, and persist a new one.

Decision order
--------------
1. An explicit identifier from the caller is returned verbatim.
2. Skipped analytics withhold the identifier (None).
3. A stored identifier is reused.
4. Otherwise a new identifier is generated and written back together with
   the previous settings. If the write fails the identifier is dropped
   (None), since it would not survive to the next run.

Only step 4 touches the settings store, and it writes exactly once.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Mapping
from typing import Any

from .models import InstallResolution
from .settings_store import SettingsStore, SettingsWriteError

logger = logging.getLogger(__name__)

IdGenerator = Callable[[], str]


def generate_install_id() -> str:
    """Return a new lower-case UUID4 string."""
    return str(uuid.uuid4())


def plan_install(
    explicit_install: str | None,
    skip_analytics: bool,
    settings: Mapping[str, Any],
    generate_id: IdGenerator = generate_install_id,
) -> InstallResolution:
    """Decide the install identifier without touching any store.

    Args:
        explicit_install: Caller supplied identifier; None or ``""`` when absent.
        skip_analytics: Resolved analytics opt-out.
        settings: Normalized settings document.
        generate_id: Factory for new identifiers.

    Returns:
        The identifier and, for a fresh one, the document to persist.
    """
    if explicit_install:
        return InstallResolution(install=explicit_install)
    if skip_analytics:
        return InstallResolution(install=None)

    stored = settings.get("install")
    if stored:
        return InstallResolution(install=stored)

    install = generate_id()
    return InstallResolution(install=install, settings_to_persist={**settings, "install": install})


def resolve_install(
    explicit_install: str | None,
    skip_analytics: bool,
    settings: Mapping[str, Any],
    store: SettingsStore,
    generate_id: IdGenerator = generate_install_id,
) -> str | None:
    """Resolve the install identifier, persisting a freshly generated one.

    Args:
        explicit_install: Caller supplied identifier; None or ``""`` when absent.
        skip_analytics: Resolved analytics opt-out.
        settings: Normalized settings document previously read from ``store``.
        store: Settings store receiving at most one write.
        generate_id: Factory for new identifiers.

    Returns:
        The identifier, or None when analytics are skipped or a new
        identifier could not be persisted.
    """
    resolution = plan_install(explicit_install, skip_analytics, settings, generate_id)
    if resolution.settings_to_persist is None:
        return resolution.install

    try:
        store.write(resolution.settings_to_persist)
    except SettingsWriteError as exc:
        logger.warning("Install identifier not persisted, analytics identity disabled: %s", exc)
        return None
    except Exception as exc:  # noqa: BLE001
        logger.warning(
            "Install identifier not persisted, settings store failed with %s: %s",
            type(exc).__name__,
            exc,
        )
        return None

    logger.debug("Generated install identifier %s", resolution.install)
    return resolution.install


__all__ = [
    "IdGenerator",
    "generate_install_id",
    "plan_install",
    "resolve_install",
]
