"""Command line interface for cli_engine_config.

Commands
--------
* ``show`` – build the configuration and print it
* ``info`` – print distribution metadata
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click

from . import __init__conf__
from .config import build_config
from .config_show import display_config
from .models import BuildOptions

logger = logging.getLogger(__name__)


def _load_pjson(path: Path | None) -> dict[str, Any] | None:
    if path is None:
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise click.BadParameter(f"cannot read {path}: {exc}", param_hint="--pjson") from exc
    if not isinstance(data, dict):
        raise click.BadParameter(f"{path} does not contain a JSON object", param_hint="--pjson")
    return data


@click.group(help=__init__conf__.title)
@click.version_option(__init__conf__.version, prog_name=__init__conf__.shell_command)
@click.option("--verbose", is_flag=True, help="Log resolution details to stderr.")
def cli(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option(
    "--pjson",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Package manifest (package.json style) describing the CLI.",
)
@click.option("--version-override", "version", help="Version that wins over the manifest.")
@click.option(
    "--skip-analytics/--no-skip-analytics",
    default=None,
    help="Force analytics off or on regardless of environment and settings.",
)
@click.option("--install", help="Install identifier to use verbatim.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["human", "json"], case_sensitive=False),
    default="human",
    show_default=True,
)
@click.option("--field", help="Only show this key (camelCase, e.g. userAgent).")
def show(
    pjson: Path | None,
    version: str | None,
    skip_analytics: bool | None,
    install: str | None,
    output_format: str,
    field: str | None,
) -> None:
    """Show the resolved configuration."""
    options = BuildOptions(
        pjson=_load_pjson(pjson),
        version=version,
        skip_analytics=skip_analytics,
        install=install,
    )
    config = build_config(options)
    display_config(config, format=output_format, field=field)


@cli.command()
def info() -> None:
    """Show distribution metadata."""
    __init__conf__.print_info()


def main() -> None:
    cli(prog_name=__init__conf__.shell_command)


__all__ = [
    "cli",
    "main",
]
