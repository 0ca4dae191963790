"""Runner — discover, assemble and persist one scrape."""

from __future__ import annotations

import logging
from pathlib import Path

from solscrape.core.assemble import AssembleOptions, assemble
from solscrape.core.config import ScanConfig
from solscrape.core.discover import discover
from solscrape.core.writer import output_filename, write_document
from solscrape.errors import NoFilesFound
from solscrape.model.result import ScrapeResult

_logger = logging.getLogger(__name__)


def run_scrape(
    root: Path,
    *,
    destination: Path,
    name: str,
    config: ScanConfig | None = None,
    options: AssembleOptions | None = None,
    source: str | None = None,
) -> ScrapeResult:
    """Scrape the local directory *root* into ``destination/<name>_scraped<ext>``.

    Run-level failures (``DiscoveryError``, ``NoFilesFound``,
    ``WriteError``) propagate before anything is written.  Per-file read
    failures are carried on the result as warnings.
    """
    cfg = config or ScanConfig()

    # ── 1. discovery ────────────────────────────────────────────────
    files = discover(root, cfg)
    if not files:
        raise NoFilesFound(f"No {cfg.file_extension} files found in the source")
    _logger.info("processing %d file(s) from %s", len(files), root)

    # ── 2. assembly ─────────────────────────────────────────────────
    document = assemble(files, options)
    if not document:
        if document.warnings:
            raise NoFilesFound(
                f"None of the {len(files)} {cfg.file_extension} file(s) could be read"
            )
        raise NoFilesFound(
            f"All {cfg.file_extension} files were empty after processing"
        )

    # ── 3. persistence ──────────────────────────────────────────────
    out_path = write_document(
        document, destination, output_filename(name, cfg.file_extension)
    )

    return ScrapeResult(
        source=source if source is not None else str(root),
        output_path=out_path,
        files_processed=document.files,
        line_count=document.line_count,
        warnings=list(document.warnings),
        file_extension=cfg.file_extension,
    )
