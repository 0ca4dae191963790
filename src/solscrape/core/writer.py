"""Persistence — write the assembled document to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from solscrape.errors import WriteError
from solscrape.model.document import OutputDocument

_logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = "_scraped"


def output_filename(name: str, file_extension: str) -> str:
    """``Token`` + ``.sol`` → ``Token_scraped.sol``."""
    return f"{name}{OUTPUT_SUFFIX}{file_extension}"


def write_document(document: OutputDocument, destination: Path, filename: str) -> Path:
    """Write *document* to ``destination / filename``, creating directories.

    Raises
    ------
    WriteError
        If the directory cannot be created or the file cannot be written.
    """
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(f"failed to create destination {destination}: {exc}") from exc

    out_path = destination / filename
    try:
        out_path.write_text(document.text, encoding="utf-8")
    except OSError as exc:
        raise WriteError(f"failed to write {out_path}: {exc}") from exc

    _logger.info("wrote %d line(s) to %s", document.line_count, out_path)
    return out_path
