"""Infrastructure: frequency-scaling environment probe.

Inspects the CPU root without modifying anything and reports whether
governors can be read and written on this machine.  Used by the
``doctor`` command.

Rules
-----
* Read-only: no governor file is opened for writing.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from cpugov.exceptions import CoreEnumerationError
from cpugov.infra.sysfs import governor_path, list_cores


# ---------------------------------------------------------------------------
# Probe result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ScalingStatus:
    """Result of probing a CPU root.

    Attributes
    ----------
    root : Path
        The CPU root that was probed.
    listable : bool
        Whether the root directory could be listed.
    cores : tuple[str, ...]
        Core identifiers found under the root, in core order.
    cpufreq_available : bool
        Whether the first core exposes a ``scaling_governor`` file.
    privileged : bool
        Whether the process runs with an effective uid of 0.
    detail : str
        Human-readable reason when the root could not be listed.
    """

    root: Path
    listable: bool
    cores: tuple[str, ...]
    cpufreq_available: bool
    privileged: bool
    detail: str = ""


# ---------------------------------------------------------------------------
# Probe logic
# ---------------------------------------------------------------------------

def _is_privileged() -> bool:
    geteuid = getattr(os, "geteuid", None)
    if geteuid is None:
        return False
    return geteuid() == 0


def detect_frequency_scaling(root: Path) -> ScalingStatus:
    """Probe *root* for cores and cpufreq support.

    Returns a :class:`ScalingStatus` regardless of the outcome; the
    caller decides whether a missing capability is fatal.
    """
    privileged = _is_privileged()
    try:
        cores = tuple(list_cores(root))
    except CoreEnumerationError as exc:
        return ScalingStatus(
            root=root,
            listable=False,
            cores=(),
            cpufreq_available=False,
            privileged=privileged,
            detail=str(exc),
        )

    cpufreq_available = bool(cores) and governor_path(root, cores[0]).is_file()
    return ScalingStatus(
        root=root,
        listable=True,
        cores=cores,
        cpufreq_available=cpufreq_available,
        privileged=privileged,
    )
