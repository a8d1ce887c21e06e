"""Configuration display functionality for the ``show`` command.

Purpose
-------
Render a resolved configuration in human-readable or JSON format. Keeps the
CLI layer thin by handling all formatting and display logic here.

Contents
--------
* :func:`config_to_dict` – camelCase mapping of a resolved configuration
* :func:`display_config` – displays a configuration in the requested format
"""

from __future__ import annotations

import json
from typing import Any

import click

from .models import ResolvedConfig
from .schemas import ResolvedConfigSchema


def config_to_dict(config: ResolvedConfig) -> dict[str, Any]:
    """Convert a ResolvedConfig to a JSON-ready dictionary with camelCase keys.

    Args:
        config: The configuration to convert.

    Returns:
        Dictionary representation of the configuration.
    """
    schema = ResolvedConfigSchema(
        name=config.name,
        dirname=config.dirname,
        version=config.version,
        user_agent=config.user_agent,
        platform=config.platform,
        arch=config.arch,
        windows=config.windows,
        shell=config.shell,
        channel=config.channel,
        update_disabled=config.update_disabled,
        debug=config.debug,
        bin=config.bin,
        root=config.root,
        default_command=config.default_command,
        s3=dict(config.s3),
        skip_analytics=config.skip_analytics,
        install=config.install,
        home=config.home,
        cache_dir=config.cache_dir,
        config_dir=config.config_dir,
        data_dir=config.data_dir,
        errlog=config.errlog,
        settings_path=config.settings_path,
    )
    return schema.model_dump(mode="json", by_alias=True)


def _format_value(value: Any) -> str:
    """Format a configuration value for human-readable display."""
    if value is None:
        return "(unset)"
    if isinstance(value, (list, dict)):
        return json.dumps(value)
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def display_config(
    config: ResolvedConfig,
    *,
    format: str = "human",
    field: str | None = None,
) -> None:
    """Display a resolved configuration.

    Args:
        config: The configuration to display.
        format: ``"human"`` for ``key = value`` lines or ``"json"``.
        field: Optional camelCase key to display on its own.

    Side Effects:
        Writes to stdout via click.echo().
        Raises SystemExit(1) if the requested field doesn't exist.

    Example:
        >>> display_config(config, field="userAgent")  # doctest: +SKIP
        userAgent = "cli-engine/0.0.0 (linux-x64) python-3.12.1"
    """
    data = config_to_dict(config)

    if field is not None:
        if field not in data:
            click.echo(f"Field '{field}' not found", err=True)
            raise SystemExit(1)
        data = {field: data[field]}

    if format.lower() == "json":
        click.echo(json.dumps(data, indent=2))
        return

    pad = max(len(key) for key in data)
    for key, value in data.items():
        click.echo(f"{key:<{pad}} = {_format_value(value)}")


__all__ = [
    "config_to_dict",
    "display_config",
]
