"""Git client wrapper used to materialize remote sources."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path

from solscrape.errors import FetchError

_logger = logging.getLogger(__name__)

# Seconds before a clone is abandoned.  0 disables the limit.
_DEFAULT_CLONE_TIMEOUT = 600


def _git_executable() -> str:
    return os.environ.get("SOLSCRAPE_GIT") or "git"


def repo_name_from_url(url: str) -> str:
    """Derive a repository name from a clone URL.

    ``https://github.com/user/my-project.git/`` → ``my-project``;
    ``git@github.com:user/repo.git`` → ``repo``.
    """
    name = url.strip().rstrip("/")
    while name.endswith(".git"):
        name = name[: -len(".git")].rstrip("/")
    name = name.rsplit("/", 1)[-1].rsplit(":", 1)[-1]
    return name or "repository"


def clone_repository(url: str, target_dir: Path, *, timeout: float | None = None) -> None:
    """Shallow-clone *url* into *target_dir*.

    Raises
    ------
    FetchError
        If git is not installed, times out, or exits non-zero.
    """
    if timeout is None:
        timeout = _DEFAULT_CLONE_TIMEOUT
    git = _git_executable()
    cmd = [git, "clone", "--depth", "1", url, str(target_dir)]
    _logger.debug("running %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout or None,
        )
    except FileNotFoundError as exc:
        raise FetchError(
            f"{git} is not installed or not in PATH. Please install Git first."
        ) from exc
    except subprocess.TimeoutExpired as exc:
        raise FetchError(f"git clone timed out after {timeout:.0f}s: {url}") from exc
    except OSError as exc:
        raise FetchError(f"failed to execute {git}: {exc}") from exc

    if result.returncode != 0:
        raise FetchError(f"git clone failed: {result.stderr.strip()}")
