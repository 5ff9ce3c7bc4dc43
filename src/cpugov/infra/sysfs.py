"""sysfs-backed implementation of :class:`~cpugov.core.protocols.GovernorStore`.

This module is the **only** place in the codebase that touches the
per-core ``scaling_governor`` files.  Every ``OSError`` is caught here
and re-raised as a :class:`~cpugov.exceptions.CpugovError` subclass.

Layout
------
::

    <root>/cpu0/cpufreq/scaling_governor
    <root>/cpu1/cpufreq/scaling_governor
    <root>/cpufreq/          (ignored)
    <root>/cpuidle/          (ignored)
"""

from __future__ import annotations

import re
from pathlib import Path

from cpugov.core.models import CoreGovernor, Governor
from cpugov.exceptions import (
    CoreEnumerationError,
    GovernorReadError,
    GovernorWriteError,
    privilege_hint,
)

DEFAULT_CPU_ROOT: Path = Path("/sys/devices/system/cpu")
"""Where the kernel exposes one directory per logical CPU."""

GOVERNOR_SUBPATH: tuple[str, ...] = ("cpufreq", "scaling_governor")

_CORE_NAME = re.compile(r"cpu(\d+)", re.ASCII)


# ---------------------------------------------------------------------------
# Enumeration
# ---------------------------------------------------------------------------

def _core_index(name: str) -> int:
    """Return the numeric suffix of a core identifier such as ``cpu12``."""
    match = _CORE_NAME.fullmatch(name)
    if match is None:
        raise ValueError(f"not a core identifier: {name!r}")
    return int(match.group(1))


def list_cores(root: Path) -> list[str]:
    """List the ``cpu<N>`` entries under *root*, ordered by ``N``.

    Entries such as ``cpufreq`` or ``cpuidle`` are skipped.

    Raises
    ------
    CoreEnumerationError
        If *root* cannot be listed.
    """
    try:
        names = [entry.name for entry in root.iterdir()]
    except OSError as exc:
        raise CoreEnumerationError(
            f"Cannot list CPUs in {root}: {exc.strerror or exc}",
            hint=privilege_hint() if isinstance(exc, PermissionError) else None,
        ) from exc

    cores = [name for name in names if _CORE_NAME.fullmatch(name)]
    return sorted(cores, key=_core_index)


# ---------------------------------------------------------------------------
# Per-core access
# ---------------------------------------------------------------------------

def governor_path(root: Path, core: str) -> Path:
    """Return ``<root>/<core>/cpufreq/scaling_governor``."""
    return root.joinpath(core, *GOVERNOR_SUBPATH)


def read_governor(root: Path, core: str) -> CoreGovernor:
    """Read the raw governor text of *core*.

    Raises
    ------
    GovernorReadError
        If the governor file cannot be opened or read.
    """
    path = governor_path(root, core)
    try:
        with path.open("r", encoding="utf-8", newline="") as fh:
            contents = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise GovernorReadError(
            core,
            f"Cannot read governor of {core} ({path}): {_describe(exc)}",
        ) from exc
    return CoreGovernor(core=core, contents=contents)


def write_governor(root: Path, core: str, governor: Governor) -> None:
    """Overwrite the governor file of *core* with *governor*.

    The file is truncated and the bare governor name written; no
    newline is appended.

    Raises
    ------
    GovernorWriteError
        If the governor file cannot be opened or written.
    """
    path = governor_path(root, core)
    try:
        with path.open("w", encoding="ascii") as fh:
            fh.write(governor.value)
    except OSError as exc:
        raise GovernorWriteError(
            core,
            f"Cannot write governor of {core} ({path}): {_describe(exc)}",
            hint=privilege_hint() if isinstance(exc, PermissionError) else None,
        ) from exc


def _describe(exc: Exception) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


# ---------------------------------------------------------------------------
# Protocol adapter
# ---------------------------------------------------------------------------

class SysfsGovernorStore:
    """Concrete :class:`GovernorStore` over a sysfs-style CPU root.

    Satisfies :class:`~cpugov.core.protocols.GovernorStore` structurally.

    Parameters
    ----------
    root:
        CPU root directory.  Defaults to :data:`DEFAULT_CPU_ROOT`.
    """

    def __init__(self, root: Path = DEFAULT_CPU_ROOT) -> None:
        self.root: Path = root

    def list_cores(self) -> list[str]:
        return list_cores(self.root)

    def read_governor(self, core: str) -> CoreGovernor:
        return read_governor(self.root, core)

    def write_governor(self, core: str, governor: Governor) -> None:
        write_governor(self.root, core, governor)
