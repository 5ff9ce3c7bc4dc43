"""CLI console helpers.

Two proxies are exposed:

* :data:`console` for diagnostics, errors, hints and tables.  Rendered
  by Rich on **stderr** and honours Rich markup.
* :data:`stdout` for command results (governor names, per-core lines).
  Written to **stdout** as-is, without Rich, so the bytes read from a
  governor file reach the terminal unaltered.

A fresh :class:`rich.console.Console` is created per call so that the
current ``sys.stderr`` is always honoured.
"""

from __future__ import annotations

import sys

from rich.console import Console


def get_rich_console() -> Console:
    """Create a Rich console targeting stderr."""
    return Console(stderr=True, highlight=False, emoji=False)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy over a Rich stderr console."""

    def print(self, *objects: object, end: str = "\n") -> None:
        get_rich_console().print(*objects, end=end, soft_wrap=True)


class _PlainStdout:
    """``print``-compatible writer emitting text to stdout verbatim."""

    def print(self, *objects: object, end: str = "\n") -> None:
        sys.stdout.write(" ".join(str(obj) for obj in objects) + end)
        sys.stdout.flush()


console = _ConsoleProxy()
stdout = _PlainStdout()
