"""Document assembly — read, strip and concatenate discovered files."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from solscrape.core.strip import strip_comments
from solscrape.errors import FileReadError
from solscrape.model.document import DocumentEntry, FileWarning, OutputDocument
from solscrape.model.source_file import SourceFile

_logger = logging.getLogger(__name__)

SEPARATOR = "// " + "═" * 70


@dataclass(frozen=True)
class AssembleOptions:
    emit_headers: bool = True
    encoding: str = "utf-8"


def format_header(relative_path: str) -> str:
    """Header block naming *relative_path*, newline-terminated."""
    return f"{SEPARATOR}\n// File: {relative_path}\n{SEPARATOR}\n"


def read_source(source: SourceFile, *, encoding: str = "utf-8") -> str:
    """Read *source* as text, raising ``FileReadError`` on any failure."""
    try:
        return source.path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise FileReadError(source.relative_path, f"not valid {encoding} text ({exc.reason})") from exc
    except OSError as exc:
        raise FileReadError(source.relative_path, exc.strerror or str(exc)) from exc


def assemble(
    files: Iterable[SourceFile],
    options: AssembleOptions | None = None,
) -> OutputDocument:
    """Build the output document from *files*, in the order given.

    Unreadable files become warnings and are skipped.  Files that are empty
    once stripped contribute nothing, not even a header.  Every body is
    newline-terminated so consecutive entries never share a line.
    """
    opts = options or AssembleOptions()
    entries: list[DocumentEntry] = []
    warnings: list[FileWarning] = []

    for source in files:
        try:
            raw = read_source(source, encoding=opts.encoding)
        except FileReadError as exc:
            _logger.warning("%s (skipped)", exc)
            warnings.append(FileWarning(exc.relative_path, exc.reason))
            continue

        body = strip_comments(raw)
        if not body:
            _logger.debug("%s is empty after cleaning, skipped", source.relative_path)
            continue
        if not body.endswith("\n"):
            body += "\n"

        header = format_header(source.relative_path) if opts.emit_headers else ""
        entries.append(DocumentEntry(source.relative_path, body, header))

    return OutputDocument(entries=tuple(entries), warnings=tuple(warnings))
