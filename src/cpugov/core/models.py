"""Domain models for cpugov.

The governor table is a closed ``Enum``; per-core results are
**frozen** dataclasses: immutable value objects with no behaviour
beyond data access and no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cpugov.exceptions import GovernorWriteError, InvalidGovernorError


# ---------------------------------------------------------------------------
# Governor table
# ---------------------------------------------------------------------------

class Governor(str, Enum):
    """The fixed set of frequency-scaling governors, in display order."""

    CONSERVATIVE = "conservative"
    ONDEMAND = "ondemand"
    USERSPACE = "userspace"
    POWERSAVE = "powersave"
    PERFORMANCE = "performance"
    SCHEDUTIL = "schedutil"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> Governor:
        """Look up a governor by its exact sysfs name.

        Raises
        ------
        InvalidGovernorError
            If *value* is not one of the known governor names.
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidGovernorError(
                f"Invalid governor: {value}",
                hint="Valid governors: " + ", ".join(GOVERNOR_NAMES),
            ) from None


GOVERNOR_NAMES: tuple[str, ...] = tuple(gov.value for gov in Governor)
"""All governor names in declaration order."""


# ---------------------------------------------------------------------------
# Per-core results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CoreGovernor:
    """The governor currently stored for one core."""

    core: str
    """Core identifier (e.g. ``cpu0``)."""

    contents: str
    """Raw file contents, including the trailing newline the kernel adds."""


@dataclass(frozen=True, slots=True)
class WriteOutcome:
    """Result of writing a governor to a single core."""

    core: str
    governor: Governor
    error: GovernorWriteError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
