"""Error taxonomy for a scrape run.

Run-level errors (``DiscoveryError``, ``NoFilesFound``, ``WriteError``,
``FetchError``) abort before any output is written.  ``FileReadError`` is
per-file: the assembler records it as a warning and moves on.
"""

from __future__ import annotations


class ScrapeError(Exception):
    """Base class for every error raised by solscrape."""


class DiscoveryError(ScrapeError):
    """Scan root is missing, not a directory, or unreadable."""


class FileReadError(ScrapeError):
    """A single source file could not be read or decoded as text."""

    def __init__(self, relative_path: str, reason: str) -> None:
        super().__init__(f"could not read {relative_path}: {reason}")
        self.relative_path = relative_path
        self.reason = reason


class NoFilesFound(ScrapeError):
    """Discovery (or cleaning) left nothing to write."""


class WriteError(ScrapeError):
    """The output document could not be persisted."""


class FetchError(ScrapeError):
    """The version-control client failed to materialize a remote source."""
