"""Configuration dataclasses for snippet rendering."""

from __future__ import annotations

from dataclasses import dataclass

API_KEY_ENV = "AUDIOSHAKE_API_KEY"
API_KEY_PLACEHOLDER = "YOUR_API_KEY"
DEFAULT_SOURCE_URL = "https://example.com/audio.mp3"

# Quote, interpolation and shell metacharacters of the snippet languages; base_url
# is written into string literals, template literals, f-strings and a bare shell word.
_BASE_URL_FORBIDDEN = frozenset("'\"`\\${}()<>;&|*?!#")


@dataclass(kw_only=True, frozen=True)
class TaskOptions:
    """
    Processing options embedded in the task-creation request of every snippet.

    Attributes:
        base_url: Root of the alignment API, without trailing slash.
        model: Model requested for the single target.
        formats: Output formats requested for the target. The first one is the
            format the snippets read the result link from.
        language: Spoken language of the source media.
    """

    base_url: str = "https://api.audioshake.ai"
    model: str = "alignment"
    formats: tuple[str, ...] = ("json",)
    language: str = "en"

    def __post_init__(self) -> None:
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an http(s) URL, got {self.base_url!r}.")
        if self.base_url.endswith("/"):
            raise ValueError(f"base_url must not end with '/', got {self.base_url!r}.")
        bad = [ch for ch in self.base_url if ch in _BASE_URL_FORBIDDEN or not ch.isprintable()]
        if bad or " " in self.base_url:
            raise ValueError(
                f"base_url must not contain quotes, whitespace or shell characters, "
                f"got {self.base_url!r}."
            )
        if not self.model:
            raise ValueError("model must be non-empty.")
        if not self.language:
            raise ValueError("language must be non-empty.")
        if not self.formats:
            raise ValueError("formats must contain at least one format.")
        if any(not f for f in self.formats):
            raise ValueError(f"formats must not contain empty values, got {self.formats!r}.")

    @property
    def result_format(self) -> str:
        return self.formats[0]


@dataclass(kw_only=True, frozen=True)
class SnippetInputs:
    """
    The two values substituted into every snippet.

    Attributes:
        api_key: Key sent in the ``x-api-key`` header.
        source_url: Media URL submitted for alignment.
    """

    api_key: str
    source_url: str

    @classmethod
    def resolve(cls, api_key: str | None, source_url: str | None) -> SnippetInputs:
        """Fill missing or blank values with the placeholder key and the sample URL."""
        return cls(
            api_key=api_key if api_key and api_key.strip() else API_KEY_PLACEHOLDER,
            source_url=source_url if source_url and source_url.strip() else DEFAULT_SOURCE_URL,
        )

    @property
    def has_api_key(self) -> bool:
        return self.api_key != API_KEY_PLACEHOLDER
