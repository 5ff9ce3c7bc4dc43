"""Protocols (interfaces) consumed by the core layer.

These define the contract that the infrastructure adapter must satisfy.
Core code depends ONLY on this protocol, never on the concrete sysfs
implementation, which keeps the service testable with in-memory fakes.
"""

from __future__ import annotations

from typing import Protocol

from cpugov.core.models import CoreGovernor, Governor


class GovernorStore(Protocol):
    """Contract for per-core governor backends.

    Implementations must map every backend-specific exception to a
    :class:`~cpugov.exceptions.CpugovError` subclass.
    """

    def list_cores(self) -> list[str]:
        """Return core identifiers ordered by ascending numeric suffix.

        Raises
        ------
        CoreEnumerationError
            When the set of cores cannot be determined.
        """
        ...  # pragma: no cover

    def read_governor(self, core: str) -> CoreGovernor:
        """Return the raw governor text stored for *core*.

        Raises
        ------
        GovernorReadError
            When the governor of *core* cannot be read.
        """
        ...  # pragma: no cover

    def write_governor(self, core: str, governor: Governor) -> None:
        """Replace the governor of *core* with *governor*.

        Raises
        ------
        GovernorWriteError
            When the governor of *core* cannot be written.
        """
        ...  # pragma: no cover
