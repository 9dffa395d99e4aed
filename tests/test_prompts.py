"""Unit tests for interactive prompt functions."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from alignsnip.cli._prompts import prompt_language
from alignsnip.cli._types import Language


class TestPromptLanguage:
    @patch("alignsnip.cli._prompts.TerminalMenu")
    def test_returns_selected_language(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 0  # SWIFT

        result = prompt_language()
        assert result is Language.SWIFT

    @patch("alignsnip.cli._prompts.TerminalMenu")
    def test_returns_last_language(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 4  # PYTHON

        result = prompt_language()
        assert result is Language.PYTHON

    @patch("alignsnip.cli._prompts.TerminalMenu")
    def test_menu_shows_labels(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 1

        prompt_language()
        labels = mock_menu_cls.call_args.args[0]
        assert labels == [lang.label for lang in Language]

    @patch("alignsnip.cli._prompts.TerminalMenu")
    def test_exit_on_none(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = None

        with pytest.raises(SystemExit):
            prompt_language()

    @patch("alignsnip.cli._prompts.TerminalMenu")
    def test_cursor_starts_on_default(self, mock_menu_cls: MagicMock) -> None:
        mock_menu_cls.return_value.show.return_value = 1

        prompt_language()
        assert mock_menu_cls.call_args.kwargs["cursor_index"] == list(Language).index(
            Language.JAVASCRIPT
        )

    @patch("alignsnip.cli._prompts.TerminalMenu")
    def test_draws_on_stderr_only(
        self, mock_menu_cls: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        mock_menu_cls.return_value.show.return_value = 3  # CURL

        prompt_language()
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Choose a language" in captured.err
        assert "curl" in captured.err
        assert "\033[" not in captured.err
