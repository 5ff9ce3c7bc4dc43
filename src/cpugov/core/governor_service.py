"""Core governor service — orchestrates per-core reads and writes.

The service depends on a :class:`~cpugov.core.protocols.GovernorStore`
injected at construction time, keeping the core free of filesystem
access.

Failure policy
--------------
* Reads are **fail-fast**: the first core that cannot be read aborts
  the iteration and the error propagates to the caller.
* Writes are **best-effort**: a core that cannot be written is recorded
  in its :class:`~cpugov.core.models.WriteOutcome` and the loop moves on
  to the next core.
* The governor value is validated, and the cores enumerated, before the
  first write is attempted.
"""

from __future__ import annotations

from collections.abc import Iterator

from cpugov.core.models import GOVERNOR_NAMES, CoreGovernor, Governor, WriteOutcome
from cpugov.core.protocols import GovernorStore
from cpugov.exceptions import GovernorWriteError


class GovernorService:
    """Stateless service driving the get/set pipelines.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`GovernorStore` protocol.
    """

    def __init__(self, store: GovernorStore) -> None:
        self._store: GovernorStore = store

    # ------------------------------------------------------------------
    # Governor table
    # ------------------------------------------------------------------

    @staticmethod
    def available_governors() -> tuple[str, ...]:
        """Return the known governor names in declaration order."""
        return GOVERNOR_NAMES

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def iter_current(self) -> Iterator[CoreGovernor]:
        """Yield the current governor of every core, in core order.

        Results are produced lazily so callers can render each core
        before the next one is read.

        Raises
        ------
        CoreEnumerationError
            If the cores cannot be enumerated.
        GovernorReadError
            On the first core whose governor cannot be read; no further
            cores are read.
        """
        for core in self._store.list_cores():
            yield self._store.read_governor(core)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def apply(self, value: str) -> Iterator[WriteOutcome]:
        """Validate *value* and return an iterator writing it to every core.

        Validation and enumeration happen eagerly, when this method is
        called; the writes themselves happen as the iterator is consumed.

        Raises
        ------
        InvalidGovernorError
            If *value* is not a known governor.  No core is touched.
        CoreEnumerationError
            If the cores cannot be enumerated.  No core is touched.
        """
        governor = Governor.parse(value)
        cores = self._store.list_cores()
        return self._write_all(cores, governor)

    def _write_all(
        self,
        cores: list[str],
        governor: Governor,
    ) -> Iterator[WriteOutcome]:
        for core in cores:
            try:
                self._store.write_governor(core, governor)
            except GovernorWriteError as exc:
                yield WriteOutcome(core=core, governor=governor, error=exc)
            else:
                yield WriteOutcome(core=core, governor=governor)
