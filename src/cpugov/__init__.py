"""cpugov — per-core CPU frequency-scaling governor control.

Reads and writes the ``scaling_governor`` file of every CPU core exposed
under the sysfs CPU root, with a strict layered architecture.
"""

from cpugov.version import __version__

__all__: list[str] = ["__version__"]
