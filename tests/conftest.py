"""Shared fixtures for the alignsnip test suite."""

import pytest

from alignsnip.core.config import TaskOptions


@pytest.fixture
def api_key() -> str:
    return "abc123"


@pytest.fixture
def source_url() -> str:
    return "https://x.com/a.mp3"


@pytest.fixture
def options() -> TaskOptions:
    return TaskOptions()


@pytest.fixture
def custom_options() -> TaskOptions:
    return TaskOptions(
        base_url="https://staging.example.org",
        model="alignment",
        formats=("srt", "json"),
        language="de",
    )
