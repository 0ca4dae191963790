"""File discovery — find source files, pruning excluded directories."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from solscrape.core.config import ScanConfig
from solscrape.errors import DiscoveryError
from solscrape.model.source_file import SourceFile

_logger = logging.getLogger(__name__)


def _check_root(root: Path) -> Path:
    """Resolve *root* and make sure it is a readable directory."""
    try:
        resolved = root.resolve(strict=True)
    except FileNotFoundError as exc:
        raise DiscoveryError(f"source path does not exist: {root}") from exc
    except OSError as exc:
        raise DiscoveryError(f"cannot access source path {root}: {exc}") from exc

    if not resolved.is_dir():
        raise DiscoveryError(f"source path is not a directory: {root}")

    try:
        with os.scandir(resolved):
            pass
    except PermissionError as exc:
        raise DiscoveryError(f"source path is not readable: {root}") from exc
    except OSError as exc:
        raise DiscoveryError(f"cannot read source path {root}: {exc}") from exc
    return resolved


def discover(root: str | Path, config: ScanConfig | None = None) -> list[SourceFile]:
    """Return eligible files under *root*, sorted by relative path.

    Parameters
    ----------
    root:
        Directory to scan.
    config:
        Extension and exclusion rules.  Default: ``ScanConfig()``.

    A directory whose name is an excluded segment is pruned with its whole
    subtree; matching is exact and case-sensitive (``testing/`` survives a
    ``test`` rule).  Files qualify on a case-sensitive suffix match
    (``.sol``, or a compound suffix such as ``.t.sol``).  Directories
    that cannot be listed mid-walk are logged and skipped.

    Raises
    ------
    DiscoveryError
        If *root* is missing, not a directory, or unreadable.
    """
    cfg = config or ScanConfig()
    base = _check_root(Path(root))
    excluded = cfg.effective_excludes

    def _on_error(exc: OSError) -> None:
        _logger.warning("skipping unreadable directory %s: %s", exc.filename, exc)

    found: list[SourceFile] = []
    for dirpath, dirnames, filenames in os.walk(base, onerror=_on_error):
        # prune in place so os.walk never descends into excluded subtrees
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        current = Path(dirpath)
        for name in sorted(filenames):
            if name == cfg.file_extension or not name.endswith(cfg.file_extension):
                continue
            path = current / name
            if not path.is_file():
                continue
            found.append(
                SourceFile(path=path, relative_path=path.relative_to(base).as_posix())
            )

    found.sort(key=lambda sf: sf.sort_key)
    _logger.debug("discovered %d %s file(s) under %s", len(found), cfg.file_extension, base)
    return found
