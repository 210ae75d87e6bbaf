"""
Dotenv support for the ``DEPTBOARD_*`` overrides.

The env-var layer of :func:`~deptboard.core.config.loader.load_config` reads
``DEPTBOARD_BASE_URL``, ``DEPTBOARD_API_PATH`` and ``DEPTBOARD_TIMEOUT``.
Those can also live in dotenv files, which are read in this order:

    ~/.config/deptboard/.env  <  .env  <  .env.local

Only keys carrying the ``DEPTBOARD_`` prefix are taken from the files, so a
project's unrelated ``.env`` entries never leak into the process. A key that
is already exported in the shell is left alone.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from dotenv import dotenv_values

from .loader import get_xdg_config_home

logger = logging.getLogger(__name__)

ENV_PREFIX = "DEPTBOARD_"


def default_env_files(project_dir: Path | None = None) -> list[Path]:
    """Dotenv files in increasing precedence: user, then project."""
    project_dir = project_dir or Path.cwd()
    return [
        get_xdg_config_home() / "deptboard" / ".env",
        project_dir / ".env",
        project_dir / ".env.local",
    ]


def read_env_files(paths: Iterable[Path]) -> dict[str, str]:
    """
    Merge the ``DEPTBOARD_*`` entries of several dotenv files.

    Later files win. Missing files are skipped, and so are keys without a
    value (``KEY`` on its own line).
    """
    merged: dict[str, str] = {}
    for path in paths:
        path = Path(path)
        if not path.is_file():
            continue
        for key, value in dotenv_values(path).items():
            if key and value is not None and key.startswith(ENV_PREFIX):
                merged[key] = value
    return merged


def load_layered_env(
    project_dir: Path | None = None, paths: Iterable[Path] | None = None
) -> dict[str, str]:
    """
    Export ``DEPTBOARD_*`` values from dotenv files into ``os.environ``.

    Args:
        project_dir: Directory holding the project ``.env`` files (defaults to cwd)
        paths: Explicit files in increasing precedence, replacing the defaults

    Returns:
        The keys that were exported, with their values
    """
    if paths is None:
        paths = default_env_files(project_dir)

    applied = {
        key: value
        for key, value in read_env_files(paths).items()
        if key not in os.environ
    }
    os.environ.update(applied)
    if applied:
        logger.debug("Loaded %s from dotenv files", ", ".join(sorted(applied)))
    return applied
