"""Domain models for configuration resolution (dataclasses).

Purpose
-------
Define the data structures that flow between the platform detector, the
environment reader, the settings store, the install identity manager and the
config builder. These are pure dataclasses used for internal logic.

For JSON input and output, use the Pydantic schemas in schemas.py.

Contents
--------
* :class:`BuildOptions` - Caller supplied overrides for one build
* :class:`PackageMetadata` - Validated package metadata (pjson)
* :class:`PlatformInfo` - Detected platform, Windows flag and shell
* :class:`EnvironmentSettings` - Interpreted environment variables
* :class:`ConfigDirs` - Per-user home, cache, config and data directories
* :class:`InstallResolution` - Outcome of the install identity decision
* :class:`ResolvedConfig` - The merged, immutable runtime configuration

Data Flow Pattern
-----------------
Options + pjson → Pydantic (validate) → Dataclass (domain) → Pydantic (render) → Output
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_NAME = "cli-engine"
DEFAULT_VERSION = "0.0.0"
DEFAULT_CHANNEL = "stable"
DEFAULT_COMMAND = "help"


def _empty_mapping() -> Mapping[str, Any]:
    """Return an empty read-only mapping for dataclass defaults."""
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class BuildOptions:
    """Explicit overrides supplied by the hosting CLI.

    Every attribute is optional; ``None`` means "not provided" and lets the
    lower precedence sources decide.

    Attributes:
        pjson: Raw package metadata (``name``, ``version``,
            ``cli-engine.dirname``).
        version: Version override, wins over ``pjson["version"]``.
        skip_analytics: Analytics override, wins over environment and
            persisted settings in both directions.
        install: Install identifier override, returned verbatim.
        root: Framework installation root override.
    """

    pjson: Mapping[str, Any] | None = None
    version: str | None = None
    skip_analytics: bool | None = None
    install: str | None = None
    root: Path | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> BuildOptions:
        """Build options from a loosely typed mapping.

        Accepts both the camelCase keys used by package manifests
        (``skipAnalytics``) and snake_case keys. Unknown keys are ignored.
        A non-boolean ``skipAnalytics`` is logged and treated as not provided.

        Args:
            data: Mapping of option names to values, or None.

        Returns:
            Options with every recognized key applied.

        Example:
            >>> BuildOptions.from_mapping({"version": "1.0.0", "skipAnalytics": True}).skip_analytics
            True
        """
        if not data:
            return cls()
        skip_analytics = data.get("skipAnalytics", data.get("skip_analytics"))
        if skip_analytics is not None and not isinstance(skip_analytics, bool):
            logger.warning("Ignoring non-boolean skipAnalytics option %r", skip_analytics)
            skip_analytics = None
        root = data.get("root")
        return cls(
            pjson=data.get("pjson"),
            version=data.get("version"),
            skip_analytics=skip_analytics,
            install=data.get("install"),
            root=Path(root) if root is not None else None,
        )


@dataclass(frozen=True, slots=True)
class PackageMetadata:
    """Package metadata fields the builder cares about.

    Attributes:
        name: Package name, or None when the manifest has none.
        version: Package version, or None.
        dirname: ``cli-engine.dirname`` setting, or None.
    """

    name: str | None = None
    version: str | None = None
    dirname: str | None = None


@dataclass(frozen=True, slots=True)
class PlatformInfo:
    """Detected platform information.

    Attributes:
        platform: ``"windows"`` on the Windows family, otherwise the raw
            host identifier (``"linux"``, ``"darwin"``, ...).
        windows: True iff the host identifier is the Windows marker.
        shell: Base name of the interactive shell, or None.
    """

    platform: str
    windows: bool
    shell: str | None = None


@dataclass(frozen=True, slots=True)
class EnvironmentSettings:
    """Recognized environment variables, already interpreted."""

    debug: int = 0
    skip_analytics: bool = False
    testing: bool = False
    update_disabled: str | None = None


@dataclass(frozen=True, slots=True)
class ConfigDirs:
    """Per-user directories for one CLI (all already joined with dirname)."""

    home: Path
    cache_dir: Path
    config_dir: Path
    data_dir: Path

    @property
    def errlog(self) -> Path:
        """Path of the error log inside the cache directory."""
        return self.cache_dir / "error.log"

    @property
    def settings_path(self) -> Path:
        """Fixed path of the persisted user settings document."""
        return self.config_dir / "config.json"


@dataclass(frozen=True, slots=True)
class InstallResolution:
    """Outcome of the install identity decision.

    Attributes:
        install: Identifier to expose, or None.
        settings_to_persist: Document to write to the settings store, or
            None when the store must not be touched.
    """

    install: str | None
    settings_to_persist: Mapping[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class ResolvedConfig:
    """The effective runtime configuration of a CLI.

    Produced fresh by :func:`cli_engine_config.config.build_config`; nothing
    in here is shared between builds.
    """

    name: str
    dirname: str
    version: str
    user_agent: str
    platform: str
    arch: str
    windows: bool
    shell: str | None
    update_disabled: str | None
    debug: int
    bin: str
    root: Path
    skip_analytics: bool
    install: str | None
    home: Path
    cache_dir: Path
    config_dir: Path
    data_dir: Path
    errlog: Path
    settings_path: Path
    pjson: PackageMetadata = field(default_factory=PackageMetadata)
    channel: str = DEFAULT_CHANNEL
    default_command: str = DEFAULT_COMMAND
    s3: Mapping[str, Any] = field(default_factory=_empty_mapping)


__all__ = [
    "BuildOptions",
    "ConfigDirs",
    "DEFAULT_CHANNEL",
    "DEFAULT_COMMAND",
    "DEFAULT_NAME",
    "DEFAULT_VERSION",
    "EnvironmentSettings",
    "InstallResolution",
    "PackageMetadata",
    "PlatformInfo",
    "ResolvedConfig",
]
