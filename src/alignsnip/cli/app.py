"""Typer CLI application for alignsnip."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Annotated

import pyperclip
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax
from typer import Exit, Option, Typer

import alignsnip
from alignsnip.cli._clipboard import COPY_FEEDBACK_DELAY, CopyButton, SnippetDisplay, copy_snippet
from alignsnip.cli._prompts import prompt_language
from alignsnip.cli._renderer import available_languages, render_snippet
from alignsnip.cli._types import DEFAULT_LANGUAGE, Language
from alignsnip.core.config import API_KEY_ENV, SnippetInputs, TaskOptions

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()
_err_console = Console(stderr=True)


@app.callback()
def main() -> None:
    """alignsnip — code snippets for the AudioShake alignment API."""


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _print_languages() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available languages")
    _console.print("[dim]│[/]")
    for lang in available_languages():
        _console.print(f"[dim]│[/]  [bold cyan]{lang.value:<12}[/] [bold]{lang.label}[/]")
        _console.print(f"[dim]│[/]  {' ' * 12} [dim]{lang.description}[/]")
        _console.print("[dim]│[/]")
    _console.print()


def _list_languages_callback(value: bool) -> None:
    if value:
        _print_languages()
        raise Exit()


def _stdin_is_interactive() -> bool:
    return sys.stdin.isatty()


def _print_snippet(snippet: str, language: Language) -> None:
    if _console.is_terminal:
        _console.print(Syntax(snippet, language.lexer, theme="ansi_dark"))
    else:
        _console.print(
            snippet, markup=False, emoji=False, highlight=False, soft_wrap=True, end=""
        )


def _copy_with_feedback(snippet: str, delay: float) -> None:
    display = SnippetDisplay(snippet)
    button = CopyButton(
        "Copy",
        on_change=lambda label: _err_console.print(f"[dim]│[/]  [bold green]{label}[/]"),
    )

    async def run() -> None:
        restore = await copy_snippet(display, button, clipboard=pyperclip.copy, delay=delay)
        await restore

    asyncio.run(run())


@app.command()
def languages() -> None:
    """List the languages snippets can be rendered in."""
    _print_languages()


@app.command()
def show(
    language_key: Annotated[
        str | None,
        Option(
            "--language",
            "-L",
            help="Snippet language. Unknown values fall back to javascript.",
            show_default=False,
        ),
    ] = None,
    api_key: Annotated[
        str | None,
        Option("--api-key", "-k", envvar=API_KEY_ENV, help="AudioShake API key."),
    ] = None,
    source_url: Annotated[
        str | None,
        Option("--source-url", "-u", help="Media URL to align."),
    ] = None,
    target_language: Annotated[
        str, Option("--target-language", help="Spoken language of the media.")
    ] = "en",
    formats: Annotated[
        list[str] | None,
        Option("--format", "-f", help="Requested output format. Repeat for several."),
    ] = None,
    copy: Annotated[
        bool, Option("--copy", "-c", help="Copy the snippet to the clipboard.")
    ] = False,
    feedback_delay: Annotated[
        float,
        Option("--feedback-delay", help="Seconds the copy acknowledgement stays visible."),
    ] = COPY_FEEDBACK_DELAY,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Enable debug logging.")] = False,
    list_languages: Annotated[
        bool,
        Option(
            "--list-languages",
            "-l",
            help="List all available languages and exit.",
            callback=_list_languages_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Render a snippet that creates an alignment task and polls it to completion."""
    _configure_logging(verbose)

    try:
        options = TaskOptions(language=target_language, formats=tuple(formats or ("json",)))
    except ValueError as exc:
        _err_console.print(f"[bold red]Error:[/] {exc}")
        raise Exit(code=2) from None

    if feedback_delay < 0:
        _err_console.print(
            f"[bold red]Error:[/] --feedback-delay must be non-negative, got {feedback_delay}."
        )
        raise Exit(code=2)

    if language_key is None:
        language = prompt_language() if _stdin_is_interactive() else DEFAULT_LANGUAGE
    else:
        language = Language.from_key(language_key)

    inputs = SnippetInputs.resolve(api_key, source_url)

    _err_console.print(f"[bold cyan]●[/]  alignsnip v{alignsnip.__version__}")
    _err_console.print("[dim]│[/]")
    _err_console.print(f"[bold green]◇[/]  {language.label} snippet")
    if not inputs.has_api_key:
        _err_console.print(
            f"[dim]│[/]  [yellow]No API key given; set {API_KEY_ENV} or pass --api-key.[/]"
        )
    _err_console.print("[dim]│[/]")

    snippet = render_snippet(language, inputs.api_key, inputs.source_url, options)
    _print_snippet(snippet, language)

    if copy:
        try:
            _copy_with_feedback(snippet, feedback_delay)
        except pyperclip.PyperclipException as exc:
            _err_console.print(f"[bold red]Error:[/] Could not copy to the clipboard: {exc}")
            raise Exit(code=1) from None
