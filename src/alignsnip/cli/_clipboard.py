"""Copies the displayed snippet to the system clipboard with transient button feedback."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass

import pyperclip

_logger = logging.getLogger(__name__)

COPY_ACKNOWLEDGEMENT = "Copied!"
COPY_FEEDBACK_DELAY = 2.0


@dataclass
class SnippetDisplay:
    """Surface holding the snippet text currently shown to the user."""

    text: str = ""


@dataclass
class CopyButton:
    """
    Button whose label flips to an acknowledgement after a copy.

    Attributes:
        label: Current label.
        on_change: Called with the new label after every assignment through ``set_label``.
    """

    label: str
    on_change: Callable[[str], None] | None = None

    def set_label(self, label: str) -> None:
        self.label = label
        if self.on_change is not None:
            self.on_change(label)


async def _restore_label(button: CopyButton, label: str, delay: float) -> None:
    await asyncio.sleep(delay)
    button.set_label(label)


async def copy_snippet(
    display: SnippetDisplay,
    button: CopyButton,
    *,
    clipboard: Callable[[str], None] = pyperclip.copy,
    delay: float = COPY_FEEDBACK_DELAY,
) -> asyncio.Task[None]:
    """
    Write ``display.text`` to the clipboard and acknowledge it on *button*.

    The clipboard write runs in a worker thread. Once it completes the button
    shows ``COPY_ACKNOWLEDGEMENT`` and the returned task restores the previous
    label after *delay* seconds. If the write raises, the exception propagates
    and the button is left alone.
    """
    if delay < 0:
        raise ValueError(f"delay must be non-negative, got {delay}.")

    text = display.text
    await asyncio.to_thread(clipboard, text)
    _logger.debug("Copied %d characters to the clipboard", len(text))

    original = button.label
    button.set_label(COPY_ACKNOWLEDGEMENT)
    return asyncio.create_task(_restore_label(button, original, delay))
