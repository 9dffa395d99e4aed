"""Interactive language picker.

The question and its answer are drawn on stderr and the menu itself on the
terminal device, so stdout carries nothing but the rendered snippet.
"""

from __future__ import annotations

from rich.console import Console
from simple_term_menu import TerminalMenu

from alignsnip.cli._types import DEFAULT_LANGUAGE, Language

_console = Console(stderr=True)

_QUESTION = "Choose a language"


def _erase_lines(count: int) -> None:
    """Move the cursor up *count* lines and clear everything below it."""
    if not _console.is_terminal:
        return
    _console.file.write(f"\033[{count}A\033[J")
    _console.file.flush()


def prompt_language(default: Language = DEFAULT_LANGUAGE) -> Language:
    """Ask which language to render. Escape aborts with exit code 1."""
    languages = list(Language)

    _console.print(f"[bold cyan]◆[/]  {_QUESTION}")
    _console.print("[dim]│[/]")

    menu = TerminalMenu(
        [lang.label for lang in languages],
        cursor_index=languages.index(default),
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    choice = menu.show()
    if choice is None:
        raise SystemExit(1)

    language = languages[int(choice)]

    # Collapse the open question into its answered form
    _erase_lines(2)
    _console.print(f"[bold green]◇[/]  {_QUESTION}")
    _console.print(f"[dim]│[/]  {language.label}")
    _console.print("[dim]│[/]")

    return language
