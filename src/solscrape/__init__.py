"""solscrape — consolidate a project's source files into one comment-free file."""

__all__ = [
    "__version__",
    "assemble",
    "discover",
    "scrape_directory",
    "scrape_source",
    "strip_comments",
    "validate_instance",
    "ScanConfig",
]
__version__ = "1.0.0"

from solscrape.api import (  # noqa: E402, F401
    assemble,
    discover,
    scrape_directory,
    scrape_source,
    strip_comments,
    validate_instance,
)
from solscrape.core.config import ScanConfig  # noqa: E402, F401
