"""Core / service layer — governor table and per-core orchestration.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O — all access goes through a ``GovernorStore``.
* No imports from ``cli`` or ``infra``.
"""

from cpugov.core.governor_service import GovernorService
from cpugov.core.models import GOVERNOR_NAMES, CoreGovernor, Governor, WriteOutcome
from cpugov.core.protocols import GovernorStore

__all__: list[str] = [
    "GOVERNOR_NAMES",
    "CoreGovernor",
    "Governor",
    "GovernorService",
    "GovernorStore",
    "WriteOutcome",
]
