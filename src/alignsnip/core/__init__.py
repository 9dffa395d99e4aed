"""Core configuration shared by the renderer and the CLI."""

from alignsnip.core.config import (
    API_KEY_ENV,
    API_KEY_PLACEHOLDER,
    DEFAULT_SOURCE_URL,
    SnippetInputs,
    TaskOptions,
)

__all__ = [
    "API_KEY_ENV",
    "API_KEY_PLACEHOLDER",
    "DEFAULT_SOURCE_URL",
    "SnippetInputs",
    "TaskOptions",
]
