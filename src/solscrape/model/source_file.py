"""SourceFile: one eligible file found by discovery."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath


@dataclass(frozen=True, slots=True)
class SourceFile:
    """A discovered file.

    ``path`` is absolute; ``relative_path`` is the POSIX path below the
    scan root, used for header labels and ordering.
    """

    path: Path
    relative_path: str

    @property
    def sort_key(self) -> tuple[str, ...]:
        return PurePosixPath(self.relative_path).parts
