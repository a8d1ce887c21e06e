"""Distribution metadata for cli_engine_config.

Contents
--------
* module constants describing the distribution
* :func:`print_info` – prints the metadata block used by ``cli-engine-config info``
"""

from __future__ import annotations

import click

name = "cli_engine_config"
title = "Layered runtime configuration and install identity for CLI frameworks"
version = "1.0.0"
homepage = "https://github.com/cli-engine/cli-engine-config"
author = "cli-engine contributors"
shell_command = "cli-engine-config"


def print_info() -> None:
    """Print the distribution metadata in an aligned block."""
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    click.echo(f"Info for {name}:\n")
    for label, value in fields:
        click.echo(f"    {label:<{pad}} = {value}")
