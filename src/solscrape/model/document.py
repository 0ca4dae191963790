"""The ordered, write-once result of assembly."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FileWarning:
    """A non-fatal, per-file problem (the file was skipped)."""

    relative_path: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"path": self.relative_path, "message": self.message}


@dataclass(frozen=True, slots=True)
class DocumentEntry:
    """One file's contribution: optional header plus stripped body."""

    relative_path: str
    body: str
    header: str = ""

    @property
    def text(self) -> str:
        return self.header + self.body


@dataclass(frozen=True, slots=True)
class OutputDocument:
    """Processed file bodies in discovery order, with per-file warnings."""

    entries: tuple[DocumentEntry, ...] = ()
    warnings: tuple[FileWarning, ...] = ()

    @property
    def text(self) -> str:
        return "".join(entry.text for entry in self.entries)

    @property
    def files(self) -> list[str]:
        return [entry.relative_path for entry in self.entries]

    @property
    def line_count(self) -> int:
        return len(self.text.splitlines())

    def __bool__(self) -> bool:
        return bool(self.entries)
