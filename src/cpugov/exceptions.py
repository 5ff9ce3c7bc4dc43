"""Custom exception hierarchy for cpugov.

All exceptions that cross layer boundaries must inherit from
:class:`CpugovError`.  Raw ``OSError`` instances raised while touching
the sysfs hierarchy must NEVER propagate beyond the infrastructure
layer; they are caught there and re-raised as a typed subclass defined
here, chained with ``raise ... from exc``.

Hierarchy
---------
CpugovError
├── InvalidGovernorError
├── GovernorSelectionError
├── CoreEnumerationError
└── GovernorAccessError
    ├── GovernorReadError
    └── GovernorWriteError
"""

from __future__ import annotations


class CpugovError(Exception):
    """Base exception for all cpugov errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input validation ------------------------------------------------------

class InvalidGovernorError(CpugovError):
    """Raised when a governor name is not one of the known governors."""


class GovernorSelectionError(CpugovError):
    """Raised when the interactive governor prompt is cancelled."""


# --- Enumeration -----------------------------------------------------------

class CoreEnumerationError(CpugovError):
    """Raised when the CPU root directory cannot be listed."""


# --- Per-core governor access ----------------------------------------------

class GovernorAccessError(CpugovError):
    """Raised when a single core's governor file cannot be accessed."""

    def __init__(
        self,
        core: str,
        message: str,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.core: str = core
        """Identifier of the offending core (e.g. ``cpu3``)."""


class GovernorReadError(GovernorAccessError):
    """Raised when a core's governor file cannot be read."""


class GovernorWriteError(GovernorAccessError):
    """Raised when a core's governor file cannot be written."""


def privilege_hint() -> str:
    """Return the standard guidance for permission failures on sysfs."""
    return "Governor files are normally writable by root only; re-run with sudo."
