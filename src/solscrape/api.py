"""
solscrape.api
=============

Programmatic entrypoints for using solscrape as a library.

Goals:
  - No argparse / CLI dependencies
  - Errors surface as ``solscrape.errors`` exceptions, never ``SystemExit``
  - JSON-friendly run summaries via ``ScrapeResult.to_dict()``

Usage::

    from solscrape.api import scrape_source, strip_comments

    result = scrape_source("https://github.com/user/repo.git", destination="out")
    result = scrape_source("./contracts", local=True, emit_headers=False)
    clean = strip_comments(text)
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Any, Optional

from solscrape.core.assemble import AssembleOptions, assemble
from solscrape.core.config import ScanConfig
from solscrape.core.discover import discover
from solscrape.core.runner import run_scrape
from solscrape.core.strip import strip_comments
from solscrape.model.result import ScrapeResult
from solscrape.vcs.git import clone_repository, repo_name_from_url

__all__ = [
    "assemble",
    "discover",
    "local_source_name",
    "scrape_directory",
    "scrape_source",
    "strip_comments",
    "validate_instance",
]

_logger = logging.getLogger(__name__)


def _to_path(p: str | Path) -> Path:
    return p if isinstance(p, Path) else Path(p)


def local_source_name(path: str | Path) -> str:
    """Default output stem for a local directory: its last segment."""
    name = _to_path(path).name
    while name.endswith(".git"):
        name = name[: -len(".git")]
    return name or "local"


# ── scrape_directory ────────────────────────────────────────────────


def scrape_directory(
    root: str | Path,
    *,
    destination: str | Path = ".",
    output_name: Optional[str] = None,
    config: Optional[ScanConfig] = None,
    emit_headers: bool = True,
    source: Optional[str] = None,
) -> ScrapeResult:
    """Scrape a local directory into a single cleaned file.

    Parameters
    ----------
    root:
        Directory to scan.
    destination:
        Directory the output file is written to (created if missing).
    output_name:
        Output stem; ``_scraped<ext>`` is appended.  Defaults to the
        directory name.
    config:
        Extension / exclusion rules.  Default: ``ScanConfig()``.
    emit_headers:
        Prefix each file with a ``// File: <path>`` header block.

    Raises
    ------
    DiscoveryError
        If *root* is missing or unreadable.
    NoFilesFound
        If nothing eligible (or non-empty) was found.
    WriteError
        If the output cannot be written.
    """
    return run_scrape(
        _to_path(root),
        destination=_to_path(destination),
        name=output_name or local_source_name(root),
        config=config,
        options=AssembleOptions(emit_headers=emit_headers),
        source=source if source is not None else str(root),
    )


# ── scrape_source ───────────────────────────────────────────────────


def scrape_source(
    source: str,
    *,
    local: bool = False,
    destination: str | Path = ".",
    output_name: Optional[str] = None,
    config: Optional[ScanConfig] = None,
    emit_headers: bool = True,
) -> ScrapeResult:
    """Scrape a git URL (shallow clone) or, with ``local=True``, a directory.

    The clone lives in a temporary directory removed once the output has
    been written.  Raises ``FetchError`` when git fails, plus everything
    ``scrape_directory`` raises.
    """
    if local:
        return scrape_directory(
            source,
            destination=destination,
            output_name=output_name,
            config=config,
            emit_headers=emit_headers,
        )

    with tempfile.TemporaryDirectory(prefix="solscrape_") as tmp:
        checkout = Path(tmp) / "repo"
        _logger.info("cloning %s", source)
        clone_repository(source, checkout)
        return scrape_directory(
            checkout,
            destination=destination,
            output_name=output_name or repo_name_from_url(source),
            config=config,
            emit_headers=emit_headers,
            source=source,
        )


def validate_instance(instance: Any, schema_name: str) -> None:
    """Validate a dict against a bundled schema (``jsonschema.ValidationError``)."""
    from solscrape.contracts.load import validate_instance as _validate

    _validate(instance, schema_name)
