"""Utility for loading project-level environment variables.

Uses `python-dotenv` to load a `.env` file sitting at the repository root
before :mod:`audio_scribe.utils.constant` reads its settings, so that PDF
layout, naming defaults and timestamp strictness can be tuned without code
changes.

Usage (call as early as possible in your CLI / entry-point):

    from audio_scribe.utils.env_loader import load_project_env
    load_project_env()

Re-invocation is a no-op, so callers can safely call multiple times.
"""

from __future__ import annotations

import functools
import pathlib
from typing import Final

from dotenv import load_dotenv

_REPO_ROOT: Final[pathlib.Path] = pathlib.Path(__file__).resolve().parents[2]
_ENV_FILE: Final[pathlib.Path] = _REPO_ROOT / ".env"


@functools.lru_cache(maxsize=1)
def load_project_env(env_file: pathlib.Path | None = None) -> bool:
    """Load the project-level `.env` file into the process environment.

    Variables already present in the environment are never overridden.

    Args:
        env_file: Optional explicit dotenv path; defaults to ``<repo>/.env``.

    Returns:
        bool: ``True`` if a dotenv file was found and loaded.
    """
    path = env_file or _ENV_FILE
    if not path.exists():
        return False
    return load_dotenv(dotenv_path=path, override=False)


__all__ = [
    "load_project_env",
]
