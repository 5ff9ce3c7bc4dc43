"""CLI application entry point and command routing for cpugov.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cpugov.exceptions.CpugovError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich on stderr and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; all work is delegated to the core
  service and the infrastructure layer.
* Command results go to stdout, diagnostics to stderr.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.markup import escape

from cpugov.cli import exit_codes
from cpugov.cli.console import console, stdout
from cpugov.core.governor_service import GovernorService
from cpugov.exceptions import CpugovError
from cpugov.infra.sysfs import DEFAULT_CPU_ROOT, SysfsGovernorStore
from cpugov.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``cpugov list``          (alias ``l``) — known governors
    * ``cpugov set [VALUE]``   (alias ``s``) — apply a governor to all cores
    * ``cpugov get-current``   (alias ``g``) — current governor per core
    * ``cpugov doctor``        — environment diagnostics
    """
    parser = argparse.ArgumentParser(
        prog="cpugov",
        description="Inspect and change the CPU frequency-scaling governor.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=DEFAULT_CPU_ROOT,
        metavar="PATH",
        help=f"CPU root directory (default: {DEFAULT_CPU_ROOT}).",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.add_parser(
        "list",
        aliases=["l"],
        help="List available power modes.",
    )
    set_parser = commands.add_parser(
        "set",
        aliases=["s"],
        help="Set a new power mode on every core.",
    )
    set_parser.add_argument(
        "value",
        nargs="?",
        default=None,
        help="Governor to apply. Prompts interactively when omitted.",
    )
    commands.add_parser(
        "get-current",
        aliases=["g"],
        help="Show the current power mode of every core.",
    )
    commands.add_parser(
        "doctor",
        help="Check whether governors can be read and changed here.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_list() -> int:
    for name in GovernorService.available_governors():
        stdout.print(name)
    return exit_codes.SUCCESS


def _handle_get_current(service: GovernorService) -> int:
    """Print ``<core>: <contents>`` per core; the first read error aborts."""
    for current in service.iter_current():
        stdout.print(f"{current.core}: {current.contents}", end="")
    return exit_codes.SUCCESS


def _current_governor(service: GovernorService) -> str | None:
    """Return the governor of the first core, or ``None`` if unreadable."""
    try:
        first = next(service.iter_current(), None)
    except CpugovError:
        return None
    return first.contents.strip() if first is not None else None


def _handle_set(service: GovernorService, value: str | None) -> int:
    """Apply *value* to every core, reporting each core's outcome.

    Per-core write failures are printed and skipped; they do not change
    the exit code.
    """
    if value is None:
        from cpugov.cli.governor_prompt import prompt_governor_selection

        value = prompt_governor_selection(
            GovernorService.available_governors(),
            current=_current_governor(service),
        )

    for outcome in service.apply(value):
        if outcome.ok:
            stdout.print(f"Governor {outcome.governor.value} written to {outcome.core}")
            continue
        console.print(
            f"[bold red]Error:[/bold red] {outcome.core}: {escape(str(outcome.error))}"
        )
        if outcome.error is not None and outcome.error.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(outcome.error.hint)}")
    return exit_codes.SUCCESS


def _handle_doctor(root: Path) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from cpugov.cli.doctor import run_doctor

    return run_doctor(root)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cpugov CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    command: str = args.command
    root: Path = args.root

    if command in ("list", "l"):
        return _handle_list()
    if command == "doctor":
        return _handle_doctor(root)

    service = GovernorService(SysfsGovernorStore(root))
    if command in ("set", "s"):
        return _handle_set(service, args.value)
    return _handle_get_current(service)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a
    raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except CpugovError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
