"""alignsnip: ready-to-paste code snippets for the AudioShake alignment API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("alignsnip")
except PackageNotFoundError:
    __version__ = "0.0.0"
