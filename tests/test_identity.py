"""Install identity stories: one identifier, chosen in a fixed order.

The identity manager returns an explicit identifier, withholds one when
analytics are skipped, reuses a stored one, or generates and persists a new
one. These tests verify each branch and how often the store is written.
"""

from __future__ import annotations

import re

import pytest

from cli_engine_config.identity import generate_install_id, plan_install, resolve_install
from cli_engine_config.models import InstallResolution
from cli_engine_config.settings_store import SettingsWriteError

from .conftest import UUID_PATTERN, FakeSettingsStore


# ════════════════════════════════════════════════════════════════════════════
# generate_install_id: The identifier factory
# ════════════════════════════════════════════════════════════════════════════


@pytest.mark.os_agnostic
def test_generate_install_id_matches_uuid4_format() -> None:
    assert re.match(UUID_PATTERN, generate_install_id())


@pytest.mark.os_agnostic
def test_generate_install_id_returns_distinct_values() -> None:
    assert generate_install_id() != generate_install_id()


# ════════════════════════════════════════════════════════════════════════════
# plan_install: The pure decision
# ════════════════════════════════════════════════════════════════════════════


@pytest.mark.os_agnostic
def test_plan_install_prefers_explicit_identifier() -> None:
    plan = plan_install("explicit", True, {"install": "stored"}, lambda: "new")

    assert plan == InstallResolution(install="explicit")


@pytest.mark.os_agnostic
def test_plan_install_withholds_when_analytics_skipped() -> None:
    plan = plan_install(None, True, {"install": "stored"}, lambda: "new")

    assert plan == InstallResolution(install=None)


@pytest.mark.os_agnostic
def test_plan_install_reuses_stored_identifier() -> None:
    plan = plan_install(None, False, {"install": "stored"}, lambda: "new")

    assert plan == InstallResolution(install="stored")


@pytest.mark.os_agnostic
def test_plan_install_generates_and_keeps_previous_settings() -> None:
    plan = plan_install(None, False, {"skipAnalytics": False, "color": "auto"}, lambda: "new")

    assert plan.install == "new"
    assert plan.settings_to_persist == {"skipAnalytics": False, "color": "auto", "install": "new"}


@pytest.mark.os_agnostic
def test_plan_install_treats_empty_strings_as_absent() -> None:
    plan = plan_install("", False, {"install": ""}, lambda: "new")

    assert plan.install == "new"
    assert plan.settings_to_persist == {"install": "new"}


@pytest.mark.os_agnostic
def test_plan_install_does_not_mutate_settings() -> None:
    settings = {"skipAnalytics": False}

    plan_install(None, False, settings, lambda: "new")

    assert settings == {"skipAnalytics": False}


# ════════════════════════════════════════════════════════════════════════════
# resolve_install: Persisting new identifiers
# ════════════════════════════════════════════════════════════════════════════


@pytest.mark.os_agnostic
def test_resolve_install_writes_new_identifier_once() -> None:
    store = FakeSettingsStore({})

    install = resolve_install(None, False, {}, store, lambda: "new")

    assert install == "new"
    assert store.writes == [{"install": "new"}]


@pytest.mark.os_agnostic
def test_resolve_install_drops_identifier_when_write_fails() -> None:
    store = FakeSettingsStore({})
    store.write_error = SettingsWriteError("disk full")

    install = resolve_install(None, False, {}, store, lambda: "new")

    assert install is None
    assert store.writes == [{"install": "new"}]


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("explicit", "skip", "settings", "expected"),
    [
        ("explicit", False, {}, "explicit"),
        (None, True, {}, None),
        (None, False, {"install": "stored"}, "stored"),
    ],
)
def test_resolve_install_leaves_store_alone_unless_generating(
    explicit: str | None, skip: bool, settings: dict[str, str], expected: str | None
) -> None:
    store = FakeSettingsStore({})

    install = resolve_install(explicit, skip, settings, store, lambda: "new")

    assert install == expected
    assert store.writes == []


@pytest.mark.os_agnostic
@pytest.mark.parametrize("error", [PermissionError("denied"), RuntimeError("boom")])
def test_resolve_install_drops_identifier_for_any_store_failure(error: Exception) -> None:
    store = FakeSettingsStore({})
    store.write_error = error

    install = resolve_install(None, False, {}, store, lambda: "new")

    assert install is None
    assert store.writes == [{"install": "new"}]
