"""Host platform, architecture and shell detection.

Contents
--------
* :func:`detect_platform` – platform name, Windows flag and interactive shell
* :func:`detect_arch` – normalized CPU architecture identifier

Both functions are pure: the host identifiers and the environment are passed
in, so callers decide whether they come from the running interpreter or from
a test.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import PurePosixPath, PureWindowsPath

from .models import PlatformInfo

logger = logging.getLogger(__name__)

WINDOWS_MARKER = "win32"

_ARCH_ALIASES = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
    "ia32": "x86",
    "aarch64": "arm64",
    "arm64": "arm64",
}


def _basename(value: str, *, windows: bool) -> str:
    """Return the last path component using the host's path rules."""
    path = PureWindowsPath(value) if windows else PurePosixPath(value)
    return path.name


def detect_platform(host_platform: str, env: Mapping[str, str]) -> PlatformInfo:
    """Detect the platform name and the interactive shell.

    On Windows the command interpreter (``COMSPEC``) wins; a POSIX shell
    (``SHELL``) covers Cygwin/MSYS on Windows and every other host. Without
    either variable no shell is guessed.

    Args:
        host_platform: Raw host identifier, e.g. ``sys.platform``.
        env: Environment snapshot.

    Returns:
        Detected platform information.

    Example:
        >>> detect_platform("darwin", {"SHELL": "/usr/bin/fish"}).shell
        'fish'
        >>> detect_platform("win32", {"COMSPEC": "C:\\\\Windows\\\\cmd.exe"}).platform
        'windows'
    """
    windows = host_platform == WINDOWS_MARKER
    platform = "windows" if windows else host_platform

    shell: str | None = None
    comspec = env.get("COMSPEC")
    posix_shell = env.get("SHELL")
    if windows and comspec:
        shell = _basename(comspec, windows=True)
    elif posix_shell:
        shell = _basename(posix_shell, windows=windows)

    logger.debug("Detected platform=%s windows=%s shell=%s", platform, windows, shell)
    return PlatformInfo(platform=platform, windows=windows, shell=shell or None)


def detect_arch(machine: str) -> str:
    """Normalize a machine identifier such as ``platform.machine()``.

    Args:
        machine: Raw machine identifier.

    Returns:
        ``x64``, ``x86`` or ``arm64`` for the common aliases, otherwise the
        lower-cased input.
    """
    key = machine.strip().lower()
    return _ARCH_ALIASES.get(key, key)


__all__ = [
    "WINDOWS_MARKER",
    "detect_arch",
    "detect_platform",
]
