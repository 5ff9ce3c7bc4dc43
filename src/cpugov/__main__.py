"""Allow ``python -m cpugov`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m cpugov`` behaves identically to the ``cpugov`` console
script.
"""

from __future__ import annotations

from cpugov.cli.app import cli

if __name__ == "__main__":
    cli()
