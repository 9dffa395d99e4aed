"""Dispatches a language key to its snippet template."""

from __future__ import annotations

import logging

from alignsnip.cli._types import Language
from alignsnip.cli.templates import SnippetTemplate, _curl, _javascript, _node, _python, _swift
from alignsnip.core.config import TaskOptions

_logger = logging.getLogger(__name__)

_TEMPLATES: dict[Language, SnippetTemplate] = {
    Language.SWIFT: _swift,
    Language.JAVASCRIPT: _javascript,
    Language.NODE: _node,
    Language.CURL: _curl,
    Language.PYTHON: _python,
}


def available_languages() -> list[Language]:
    return list(_TEMPLATES)


def render_snippet(
    language_key: str | Language,
    api_key: str,
    source_url: str,
    options: TaskOptions | None = None,
) -> str:
    """Render the snippet for *language_key*. Unknown keys render the JavaScript snippet."""
    language = Language.from_key(language_key)
    if language.value != language_key:
        _logger.debug("Unknown language %r, rendering %s", language_key, language.value)

    _logger.debug("Rendering %s snippet", language.value)
    return _TEMPLATES[language].render(api_key, source_url, options or TaskOptions())
