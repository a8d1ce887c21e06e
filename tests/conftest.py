"""Shared fixtures: an in-memory settings store and a clean environment."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest


UUID_PATTERN = r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"


class FakeSettingsStore:
    """Settings store that keeps its document in memory and records writes."""

    def __init__(self, document: object = None) -> None:
        self.document: object = {} if document is None else document
        self.read_error: BaseException | None = None
        self.write_error: BaseException | None = None
        self.reads = 0
        self.writes: list[dict[str, Any]] = []

    def read(self) -> object:
        self.reads += 1
        if self.read_error is not None:
            raise self.read_error
        return copy.deepcopy(self.document)

    def write(self, document: Mapping[str, Any]) -> None:
        self.writes.append(dict(document))
        if self.write_error is not None:
            raise self.write_error
        self.document = dict(document)


@pytest.fixture
def store() -> FakeSettingsStore:
    """Provide a store holding ``{"skipAnalytics": True}``."""
    return FakeSettingsStore({"skipAnalytics": True})


@pytest.fixture
def pjson() -> dict[str, Any]:
    """Provide package metadata of a CLI named 'analytics'."""
    return {
        "name": "analytics",
        "version": "1.0.0",
        "cli-engine": {"dirname": "heroku"},
    }


@pytest.fixture
def env(tmp_path: Path) -> dict[str, str]:
    """Provide an environment snapshot with a throwaway home directory."""
    return {"HOME": str(tmp_path / "home")}
