"""Configuration builder.

Purpose
-------
Merge compiled-in defaults, package metadata, environment variables, the
persisted user settings document and explicit caller overrides into one
immutable :class:`~cli_engine_config.models.ResolvedConfig`.

Contents
--------
* :func:`build_config` – resolves the configuration for one CLI process
* :func:`parse_package_metadata` – validates package metadata (pjson)
* :func:`get_default_root` – returns the framework installation root

Precedence
----------
Highest wins:

* ``version``: option → pjson ``version`` → ``"0.0.0"``
* ``name``: pjson ``name`` → ``"cli-engine"``
* ``dirname``: pjson ``cli-engine.dirname`` → ``name``
* ``skip_analytics``: option → ``TESTING`` → ``CLI_ENGINE_SKIP_ANALYTICS``
  → user settings ``skipAnalytics`` → False

System Role
-----------
The single entry point the surrounding CLI framework consumes. It never
raises: every failure degrades to a documented default.
"""

from __future__ import annotations

import logging
import os
import platform as host
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .dirs import resolve_dirs
from .environment import read_environment
from .identity import IdGenerator, generate_install_id, resolve_install
from .models import (
    DEFAULT_NAME,
    DEFAULT_VERSION,
    BuildOptions,
    EnvironmentSettings,
    PackageMetadata,
    ResolvedConfig,
)
from .platform_detector import detect_arch, detect_platform
from .schemas import PackageJsonSchema
from .settings_store import JsonSettingsStore, SettingsStore, normalize_settings

logger = logging.getLogger(__name__)


def get_default_root() -> Path:
    """Return the directory that contains the installed package.

    Example:
        >>> (get_default_root() / "cli_engine_config").is_dir()
        True
    """
    return Path(__file__).resolve().parent.parent


def parse_package_metadata(pjson: Mapping[str, Any] | None) -> PackageMetadata:
    """Validate package metadata, falling back to empty metadata.

    Args:
        pjson: Raw manifest mapping, or None.

    Returns:
        The recognized fields; invalid manifests are logged and ignored.
    """
    if not pjson:
        return PackageMetadata()
    try:
        schema = PackageJsonSchema.model_validate(dict(pjson))
    except (ValidationError, TypeError, ValueError) as exc:
        logger.warning("Ignoring invalid package metadata: %s", exc)
        return PackageMetadata()
    return PackageMetadata(
        name=schema.name or None,
        version=schema.version or None,
        dirname=(schema.cli_engine.dirname or None) if schema.cli_engine else None,
    )


def _coerce_options(options: BuildOptions | Mapping[str, Any] | None) -> BuildOptions:
    if isinstance(options, BuildOptions):
        return options
    return BuildOptions.from_mapping(options)


def _read_settings(store: SettingsStore) -> dict[str, Any]:
    try:
        raw = store.read()
    except FileNotFoundError:
        return {}
    except OSError as exc:
        logger.warning("Ignoring unreadable user settings: %s", exc)
        return {}
    except Exception as exc:  # noqa: BLE001
        logger.warning("Ignoring user settings, settings store failed with %s: %s", type(exc).__name__, exc)
        return {}
    return normalize_settings(raw)


def _resolve_skip_analytics(
    option: bool | None,
    environment: EnvironmentSettings,
    settings: Mapping[str, Any],
) -> bool:
    if option is not None:
        return option
    if environment.testing or environment.skip_analytics:
        return True
    return bool(settings.get("skipAnalytics", False))


def build_config(
    options: BuildOptions | Mapping[str, Any] | None = None,
    *,
    env: Mapping[str, str] | None = None,
    host_platform: str | None = None,
    machine: str | None = None,
    store: SettingsStore | None = None,
    generate_id: IdGenerator | None = None,
) -> ResolvedConfig:
    """Resolve the effective configuration for one CLI process.

    Reads the settings store once and writes it at most once (only when a
    new install identifier is generated).

    Args:
        options: Explicit overrides, as :class:`BuildOptions` or a mapping
            with ``pjson``, ``version``, ``skipAnalytics``, ``install`` and
            ``root`` keys.
        env: Environment mapping; defaults to a snapshot of ``os.environ``.
        host_platform: Host identifier; defaults to ``sys.platform``.
        machine: Machine identifier; defaults to ``platform.machine()``.
        store: Settings store; defaults to the JSON file at the per-user
            settings path.
        generate_id: Factory for new install identifiers.

    Returns:
        A fresh, immutable configuration.

    Example:
        >>> config = build_config(env={"TESTING": "1"})
        >>> config.name, config.version, config.default_command
        ('cli-engine', '0.0.0', 'help')
    """
    opts = _coerce_options(options)
    environ = dict(os.environ if env is None else env)
    pjson = parse_package_metadata(opts.pjson)

    name = pjson.name or DEFAULT_NAME
    dirname = pjson.dirname or name
    version = opts.version or pjson.version or DEFAULT_VERSION
    bin = name

    detected = detect_platform(host_platform or sys.platform, environ)
    arch = detect_arch(machine if machine is not None else host.machine())
    environment = read_environment(environ, bin=bin)
    dirs = resolve_dirs(dirname, env=environ, platform=detected.platform, windows=detected.windows)

    settings_store = store if store is not None else JsonSettingsStore(dirs.settings_path)
    settings = _read_settings(settings_store)

    skip_analytics = _resolve_skip_analytics(opts.skip_analytics, environment, settings)
    install = resolve_install(
        opts.install,
        skip_analytics,
        settings,
        settings_store,
        generate_id or generate_install_id,
    )

    user_agent = f"{name}/{version} ({detected.platform}-{arch}) python-{host.python_version()}"
    logger.debug("Resolved %s %s (skip_analytics=%s)", name, version, skip_analytics)

    return ResolvedConfig(
        name=name,
        dirname=dirname,
        version=version,
        user_agent=user_agent,
        platform=detected.platform,
        arch=arch,
        windows=detected.windows,
        shell=detected.shell,
        update_disabled=environment.update_disabled,
        debug=environment.debug,
        bin=bin,
        root=opts.root or get_default_root(),
        skip_analytics=skip_analytics,
        install=install,
        home=dirs.home,
        cache_dir=dirs.cache_dir,
        config_dir=dirs.config_dir,
        data_dir=dirs.data_dir,
        errlog=dirs.errlog,
        settings_path=dirs.settings_path,
        pjson=pjson,
    )


__all__ = [
    "build_config",
    "get_default_root",
    "parse_package_metadata",
]
