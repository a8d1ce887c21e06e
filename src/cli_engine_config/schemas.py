"""Pydantic schemas for external data boundaries.

Purpose
-------
Define Pydantic models for data that crosses system boundaries:
- Input: package metadata (pjson) handed over by the hosting CLI
- Input/Output: the persisted user settings document
- Output: JSON rendering of a resolved configuration

These models handle validation, coercion, and serialization at the edges
while internal logic uses lightweight dataclasses.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CliEngineSection(BaseModel):
    """Schema for the ``cli-engine`` section of package metadata."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    dirname: str | None = None


class PackageJsonSchema(BaseModel):
    """Schema for package metadata.

    Only ``name``, ``version`` and ``cli-engine.dirname`` are read; every
    other manifest key is ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str | None = None
    version: str | None = None
    cli_engine: CliEngineSection | None = Field(default=None, alias="cli-engine")


class UserSettingsSchema(BaseModel):
    """Schema for the persisted per-user settings document.

    Unknown keys are allowed so a rewrite keeps whatever else the file holds.
    """

    model_config = ConfigDict(extra="allow")

    skip_analytics: bool | None = Field(default=None, alias="skipAnalytics")
    install: str | None = None


class ResolvedConfigSchema(BaseModel):
    """Schema for rendering a resolved configuration with camelCase keys."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    name: str
    dirname: str
    version: str
    user_agent: str
    platform: str
    arch: str
    windows: bool
    shell: str | None
    channel: str
    update_disabled: str | None
    debug: int
    bin: str
    root: Path
    default_command: str
    s3: dict[str, Any] = Field(default_factory=dict)
    skip_analytics: bool
    install: str | None
    home: Path
    cache_dir: Path
    config_dir: Path
    data_dir: Path
    errlog: Path
    settings_path: Path


__all__ = [
    "CliEngineSection",
    "PackageJsonSchema",
    "ResolvedConfigSchema",
    "UserSettingsSchema",
]
