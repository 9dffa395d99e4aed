"""Tests for CLI enums."""

from __future__ import annotations

import pytest

from alignsnip.cli._types import DEFAULT_LANGUAGE, Language


class TestLanguage:
    @pytest.mark.parametrize("language", list(Language))
    def test_from_key_exact(self, language: Language) -> None:
        assert Language.from_key(language.value) is language

    @pytest.mark.parametrize("key", ["", "rust", "Swift", "curl "])
    def test_from_key_falls_back_to_javascript(self, key: str) -> None:
        assert Language.from_key(key) is Language.JAVASCRIPT

    def test_default_is_javascript(self) -> None:
        assert DEFAULT_LANGUAGE is Language.JAVASCRIPT

    def test_values(self) -> None:
        expected = ["swift", "javascript", "node", "curl", "python"]
        assert [lang.value for lang in Language] == expected

    @pytest.mark.parametrize("language", list(Language))
    def test_every_language_has_metadata(self, language: Language) -> None:
        assert language.label
        assert language.description
        assert language.lexer
