"""Enums for CLI options."""

from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    """Languages a snippet can be rendered in."""

    SWIFT = "swift"
    JAVASCRIPT = "javascript"
    NODE = "node"
    CURL = "curl"
    PYTHON = "python"

    @classmethod
    def from_key(cls, key: str) -> Language:
        """Look up *key*; anything that is not an exact member value maps to JavaScript."""
        try:
            return cls(key)
        except ValueError:
            return DEFAULT_LANGUAGE

    @property
    def label(self) -> str:
        labels: dict[Language, str] = {
            Language.SWIFT: "Swift",
            Language.JAVASCRIPT: "JavaScript",
            Language.NODE: "Node.js",
            Language.CURL: "curl",
            Language.PYTHON: "Python",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[Language, str] = {
            Language.SWIFT: "Swift concurrency actor with URLSession. Runs in a Playground.",
            Language.JAVASCRIPT: "Browser fetch with top-level await. Paste into the DevTools console.",  # noqa: E501
            Language.NODE: "Standalone .mjs script with a polling loop. Requires Node 18+.",
            Language.CURL: "Two shell commands: create the task, then check its status.",
            Language.PYTHON: "requests-based script that polls until the alignment completes.",
        }
        return descriptions[self]

    @property
    def lexer(self) -> str:
        lexers: dict[Language, str] = {
            Language.SWIFT: "swift",
            Language.JAVASCRIPT: "javascript",
            Language.NODE: "javascript",
            Language.CURL: "bash",
            Language.PYTHON: "python",
        }
        return lexers[self]


DEFAULT_LANGUAGE = Language.JAVASCRIPT
