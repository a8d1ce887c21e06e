"""Per-user directory resolution.

Each CLI keeps its cache, config and data under a directory named after its
``dirname``. The base directories follow the XDG variables on POSIX hosts,
``LOCALAPPDATA`` on Windows and ``~/Library/Caches`` for caches on macOS.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from .models import ConfigDirs


def resolve_home(env: Mapping[str, str], *, windows: bool) -> Path:
    """Return the user's home directory from the environment snapshot."""
    home = env.get("HOME")
    if not home and windows:
        home = env.get("USERPROFILE")
    return Path(home) if home else Path.home()


def _base_dir(
    env: Mapping[str, str],
    xdg_var: str,
    default: Path,
    *,
    windows: bool,
) -> Path:
    if windows and env.get("LOCALAPPDATA"):
        return Path(env["LOCALAPPDATA"])
    if env.get(xdg_var):
        return Path(env[xdg_var])
    return default


def resolve_dirs(
    dirname: str,
    *,
    env: Mapping[str, str],
    platform: str,
    windows: bool,
) -> ConfigDirs:
    """Resolve the cache, config and data directories for ``dirname``.

    Args:
        dirname: Directory name of the CLI (usually its package name).
        env: Environment snapshot.
        platform: Detected platform name.
        windows: Whether the host is the Windows family.

    Returns:
        Directories already joined with ``dirname``.

    Example:
        >>> dirs = resolve_dirs("mycli", env={"HOME": "/home/me"}, platform="linux", windows=False)
        >>> dirs.settings_path.as_posix()
        '/home/me/.config/mycli/config.json'
    """
    home = resolve_home(env, windows=windows)
    cache_default = home / "Library" / "Caches" if platform == "darwin" else home / ".cache"

    return ConfigDirs(
        home=home,
        cache_dir=_base_dir(env, "XDG_CACHE_HOME", cache_default, windows=windows) / dirname,
        config_dir=_base_dir(env, "XDG_CONFIG_HOME", home / ".config", windows=windows) / dirname,
        data_dir=_base_dir(env, "XDG_DATA_HOME", home / ".local" / "share", windows=windows) / dirname,
    )


__all__ = [
    "resolve_dirs",
    "resolve_home",
]
