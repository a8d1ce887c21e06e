"""Directory resolution stories: every CLI gets its own corner of the home."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli_engine_config.dirs import resolve_dirs, resolve_home


@pytest.mark.os_agnostic
def test_linux_defaults_follow_xdg_fallbacks() -> None:
    dirs = resolve_dirs("mycli", env={"HOME": "/home/me"}, platform="linux", windows=False)

    assert dirs.home == Path("/home/me")
    assert dirs.cache_dir == Path("/home/me/.cache/mycli")
    assert dirs.config_dir == Path("/home/me/.config/mycli")
    assert dirs.data_dir == Path("/home/me/.local/share/mycli")
    assert dirs.errlog == Path("/home/me/.cache/mycli/error.log")
    assert dirs.settings_path == Path("/home/me/.config/mycli/config.json")


@pytest.mark.os_agnostic
def test_xdg_variables_override_defaults() -> None:
    env = {
        "HOME": "/home/me",
        "XDG_CACHE_HOME": "/xdg/cache",
        "XDG_CONFIG_HOME": "/xdg/config",
        "XDG_DATA_HOME": "/xdg/data",
    }

    dirs = resolve_dirs("mycli", env=env, platform="linux", windows=False)

    assert dirs.cache_dir == Path("/xdg/cache/mycli")
    assert dirs.config_dir == Path("/xdg/config/mycli")
    assert dirs.data_dir == Path("/xdg/data/mycli")


@pytest.mark.os_agnostic
def test_macos_caches_live_in_library() -> None:
    dirs = resolve_dirs("mycli", env={"HOME": "/Users/me"}, platform="darwin", windows=False)

    assert dirs.cache_dir == Path("/Users/me/Library/Caches/mycli")


@pytest.mark.os_agnostic
def test_windows_uses_localappdata() -> None:
    env = {"USERPROFILE": "/users/me", "LOCALAPPDATA": "/users/me/AppData/Local"}

    dirs = resolve_dirs("mycli", env=env, platform="windows", windows=True)

    assert dirs.home == Path("/users/me")
    assert dirs.config_dir == Path("/users/me/AppData/Local/mycli")
    assert dirs.cache_dir == Path("/users/me/AppData/Local/mycli")


@pytest.mark.os_agnostic
def test_userprofile_is_ignored_outside_windows(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

    assert resolve_home({"USERPROFILE": "/users/me"}, windows=False) == tmp_path
