"""Interactive governor selection for ``cpugov set`` without a value.

Renders the current governor per core (when readable) and lets the user
pick one of the known governors with questionary arrow keys.  Returns
the selected governor name; applying it is the caller's job.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from cpugov.cli.console import console
from cpugov.exceptions import GovernorSelectionError


def _import_questionary() -> Any:
    """Import questionary lazily; it is only needed for interactive use."""
    import questionary

    return questionary


def _build_choice_label(index: int, name: str, current: str | None) -> str:
    """Build the label shown in the selector.

    Format: ``"  5.  performance   (current)"``
    """
    marker = "(current)" if name == current else ""
    return f"  {index + 1}.  {name:<13} {marker}".rstrip()


def prompt_governor_selection(
    governors: Sequence[str],
    *,
    current: str | None = None,
) -> str:
    """Prompt the user to pick one of *governors*.

    Parameters
    ----------
    governors:
        Governor names in display order.
    current:
        Governor currently active on the first core, highlighted as the
        default choice.  ``None`` when unknown.

    Raises
    ------
    KeyboardInterrupt
        If the user presses Ctrl+C during selection.
    GovernorSelectionError
        If the user cancels the prompt (Esc / ``None`` return).
    """
    questionary = _import_questionary()

    if current is not None:
        console.print(f"[bold cyan]Current governor:[/bold cyan] {current}")

    choices = [
        questionary.Choice(
            title=_build_choice_label(i, name, current),
            value=name,
        )
        for i, name in enumerate(governors)
    ]
    default = next((c for c in choices if c.value == current), None)

    selected: str | None = questionary.select(
        "Select governor to apply to all cores:",
        choices=choices,
        default=default,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # None on Ctrl+C / Esc

    if selected is None:
        raise GovernorSelectionError(
            "No governor selected.",
            hint="Use arrow keys to pick a governor, then press Enter.",
        )

    return selected
