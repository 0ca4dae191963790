"""Exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — output written (per-file warnings do not change this)
  2   Error — usage error, missing source, nothing to scrape, fetch/write failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 2
