"""Public package surface for layered CLI configuration.

This package resolves the effective runtime configuration of a command-line
tool from compiled-in defaults, package metadata, environment variables, a
persisted per-user settings file and explicit overrides, and maintains the
anonymous install identifier used for usage analytics.

Main API
--------
* :func:`build_config` - Resolve a :class:`ResolvedConfig`
* :class:`BuildOptions` - Explicit overrides for a build
* :class:`JsonSettingsStore` - File-backed user settings store
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .config import build_config
from .config_show import config_to_dict, display_config
from .identity import generate_install_id
from .models import (
    BuildOptions,
    ConfigDirs,
    PackageMetadata,
    PlatformInfo,
    ResolvedConfig,
)
from .settings_store import JsonSettingsStore, SettingsStore, SettingsWriteError

__all__ = [
    "BuildOptions",
    "ConfigDirs",
    "JsonSettingsStore",
    "PackageMetadata",
    "PlatformInfo",
    "ResolvedConfig",
    "SettingsStore",
    "SettingsWriteError",
    "build_config",
    "config_to_dict",
    "display_config",
    "generate_install_id",
    "print_info",
]
