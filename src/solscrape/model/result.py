"""Summary of a completed run, aligned with scrape_result.schema.json."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from solscrape import __version__
from solscrape.model.document import FileWarning


@dataclass(slots=True)
class ScrapeResult:
    """Built by ``core.runner`` after the document has been written.

    ``to_dict()`` matches ``scrape_result.schema.json``.
    """

    source: str
    output_path: Path
    files_processed: list[str] = field(default_factory=list)
    line_count: int = 0
    warnings: list[FileWarning] = field(default_factory=list)
    file_extension: str = ".sol"
    tool_version: str = __version__

    @property
    def file_count(self) -> int:
        return len(self.files_processed)

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema_version": "scrape_result_v1",
            "tool_version": self.tool_version,
            "source": self.source,
            "output_path": self.output_path.as_posix(),
            "file_extension": self.file_extension,
            "summary": {
                "file_count": self.file_count,
                "line_count": self.line_count,
                "warning_count": len(self.warnings),
            },
            "files": list(self.files_processed),
            "warnings": [w.to_dict() for w in self.warnings],
        }
