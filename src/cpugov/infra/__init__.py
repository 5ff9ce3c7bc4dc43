"""Infrastructure layer — sysfs integration.

This layer wraps all interaction with the operating system's CPU
hierarchy.  Every raw ``OSError`` must be caught here and re-raised as
a :class:`~cpugov.exceptions.CpugovError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from cpugov.infra.sysfs import (
    DEFAULT_CPU_ROOT,
    SysfsGovernorStore,
    governor_path,
    list_cores,
    read_governor,
    write_governor,
)
from cpugov.infra.sysfs_probe import ScalingStatus, detect_frequency_scaling

__all__: list[str] = [
    "DEFAULT_CPU_ROOT",
    "ScalingStatus",
    "SysfsGovernorStore",
    "detect_frequency_scaling",
    "governor_path",
    "list_cores",
    "read_governor",
    "write_governor",
]
