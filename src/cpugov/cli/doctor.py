"""``cpugov doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether governors can be read and changed on this machine.

This module lives in the CLI layer — it may import from ``infra``
and renders via Rich.  It only collects and displays diagnostic data.
"""

from __future__ import annotations

import platform
import sys
from pathlib import Path

from rich.markup import escape
from rich.table import Table

from cpugov.cli import exit_codes
from cpugov.cli.console import console
from cpugov.exceptions import privilege_hint
from cpugov.infra.sysfs_probe import ScalingStatus, detect_frequency_scaling
from cpugov.version import __version__

_OK = "[green]OK[/green]"
_WARN = "[yellow]WARN[/yellow]"
_FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _cpugov_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the cpugov version row."""
    return "cpugov", __version__, _OK


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = _OK if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system = platform.system()
    value = f"{system} {platform.release()} ({platform.machine()})"
    status = _OK if system == "Linux" else _WARN
    return "OS", value, status


def _root_check(status: ScalingStatus) -> tuple[str, str, str]:
    """Return (label, value, status) for the CPU root row."""
    if not status.listable:
        return "CPU root", f"{status.root} (unreadable)", _FAIL
    count = len(status.cores)
    value = f"{status.root} ({count} core{'s' if count != 1 else ''})"
    return "CPU root", value, _OK if count else _WARN


def _cpufreq_check(status: ScalingStatus) -> tuple[str, str, str]:
    """Return (label, value, status) for the cpufreq row."""
    if status.cpufreq_available:
        return "cpufreq", "scaling_governor present", _OK
    return "cpufreq", "scaling_governor missing", _WARN


def _privilege_check(status: ScalingStatus) -> tuple[str, str, str]:
    """Return (label, value, status) for the privileges row."""
    if status.privileged:
        return "Privileges", "root", _OK
    return "Privileges", "unprivileged (set needs root)", _WARN


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(root: Path) -> int:
    """Execute all diagnostic checks for *root* and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.  WARN rows do not
        count as failures.
    """
    status = detect_frequency_scaling(root)
    checks = [
        _cpugov_version_check(),
        _python_version_check(),
        _os_check(),
        _root_check(status),
        _cpufreq_check(status),
        _privilege_check(status),
    ]

    table = Table(
        title="cpugov doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, state in checks:
        table.add_row(label, escape(value), state)

    console.print()
    console.print(table)
    console.print()

    if status.detail:
        console.print(f"[yellow]{escape(status.detail)}[/yellow]")
    if not status.privileged:
        console.print(f"[dim]{privilege_hint()}[/dim]")

    if any("FAIL" in state for _, _, state in checks):
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR

    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
