"""Shared pytest fixtures and configuration for the cpugov test suite.

Guidelines
----------
* Tests never touch the real ``/sys`` hierarchy.
* Infra tests run against a fake CPU root built under ``tmp_path``.
* Core tests use mocked stores and no filesystem.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

import pytest

MakeCpuRoot = Callable[..., Path]

UNWRITABLE = object()
"""Marker: make the core's ``scaling_governor`` a directory, so opening fails."""


def build_cpu_root(
    root: Path,
    governors: Mapping[str, object],
    *,
    extra_dirs: Sequence[str] = (),
) -> Path:
    """Create a sysfs-like CPU tree under *root*.

    *governors* maps a core name to the contents of its governor file.
    ``None`` creates the core directory without a ``cpufreq`` entry;
    :data:`UNWRITABLE` creates ``scaling_governor`` as a directory.
    """
    root.mkdir(parents=True, exist_ok=True)
    for core, contents in governors.items():
        core_dir = root / core
        core_dir.mkdir()
        if contents is None:
            continue
        cpufreq = core_dir / "cpufreq"
        cpufreq.mkdir()
        if contents is UNWRITABLE:
            (cpufreq / "scaling_governor").mkdir()
        else:
            (cpufreq / "scaling_governor").write_text(str(contents), encoding="ascii")
    for name in extra_dirs:
        (root / name).mkdir()
    return root


@pytest.fixture
def make_cpu_root(tmp_path: Path) -> MakeCpuRoot:
    """Factory fixture building a fake CPU root under ``tmp_path``."""

    def _make(
        governors: Mapping[str, object],
        *,
        extra_dirs: Sequence[str] = (),
    ) -> Path:
        return build_cpu_root(tmp_path / "cpu", governors, extra_dirs=extra_dirs)

    return _make
