"""Template modules for snippet rendering."""

from __future__ import annotations

from typing import Protocol

from alignsnip.core.config import TaskOptions


class SnippetTemplate(Protocol):
    """Protocol for template modules. Each exposes a render() returning the snippet text."""

    def render(self, api_key: str, source_url: str, options: TaskOptions) -> str: ...
