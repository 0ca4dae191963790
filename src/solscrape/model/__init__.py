"""Value types shared by discovery, assembly and the run summary."""

from __future__ import annotations

from solscrape.model.document import DocumentEntry, FileWarning, OutputDocument
from solscrape.model.result import ScrapeResult
from solscrape.model.source_file import SourceFile

__all__ = [
    "DocumentEntry",
    "FileWarning",
    "OutputDocument",
    "ScrapeResult",
    "SourceFile",
]
