"""Command-line interface for alignsnip."""

from alignsnip.cli.app import app

__all__ = ["app"]
