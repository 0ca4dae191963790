"""Scan configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field

# Build output, caches and vendored dependencies are never scraped.
ALWAYS_EXCLUDED = frozenset(
    {
        ".git",
        "node_modules",
        "out",
        "cache",
        "artifacts",
        "build",
        "coverage",
        "dependencies",
        ".deps",
    }
)

LIB_SEGMENTS = frozenset({"lib"})
TEST_SEGMENTS = frozenset({"test", "tests", "Test", "Tests"})
SCRIPT_SEGMENTS = frozenset({"script", "scripts", "Script", "Scripts"})

DEFAULT_EXCLUDED = ALWAYS_EXCLUDED | LIB_SEGMENTS | TEST_SEGMENTS | SCRIPT_SEGMENTS

DEFAULT_EXTENSION = ".sol"


def normalize_extension(ext: str) -> str:
    """Return *ext* with exactly one leading dot (``"sol"`` → ``".sol"``)."""
    ext = ext.strip()
    if not ext:
        raise ValueError("file extension must not be empty")
    return ext if ext.startswith(".") else f".{ext}"


@dataclass(frozen=True)
class ScanConfig:
    """Immutable scan configuration.

    ``excluded_segments`` lists directory names pruned during discovery.
    The ``include_*`` flags take their group back out of that set; see
    :attr:`effective_excludes`.
    """

    file_extension: str = DEFAULT_EXTENSION
    excluded_segments: frozenset[str] = field(default=DEFAULT_EXCLUDED)
    include_lib: bool = False
    include_test: bool = False
    include_script: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "file_extension", normalize_extension(self.file_extension)
        )
        object.__setattr__(
            self, "excluded_segments", frozenset(self.excluded_segments)
        )

    @property
    def effective_excludes(self) -> frozenset[str]:
        """Directory names actually pruned once the include flags apply."""
        excluded = set(self.excluded_segments)
        if self.include_lib:
            excluded -= LIB_SEGMENTS
        if self.include_test:
            excluded -= TEST_SEGMENTS
        if self.include_script:
            excluded -= SCRIPT_SEGMENTS
        return frozenset(excluded)
