"""Environment loading helpers.

The remote URL and key usually live in a .env file next to the project,
the same file a frontend build would read. Layers, highest first:

  os.environ (already exported) > project .env.local > project .env > user .env

A .env file never overrides a variable that was exported in the shell.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from dotenv import dotenv_values

logger = logging.getLogger(__name__)


def user_env_path() -> Path:
    """Path of the per-user env file (XDG aware)."""
    xdg_home = Path(os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config")))
    return xdg_home / "issueboard" / ".env"


def read_env_file(path: Path) -> dict[str, str]:
    """Parse one env file, skipping keys without a value."""
    if not path.is_file():
        return {}
    return {str(k): str(v) for k, v in dotenv_values(path).items() if k and v is not None}


def load_layered_env(
    *,
    project_dir: Path | None = None,
    user_env_paths: Iterable[Path] | None = None,
    project_env_paths: Iterable[Path] | None = None,
) -> list[str]:
    """Merge user and project env files into os.environ.

    Args:
        project_dir: base directory for project env paths (defaults to cwd)
        user_env_paths: explicit user env file paths
        project_env_paths: explicit project env file paths, lowest priority first

    Returns:
        Names of the variables that were set from files
    """
    project_dir = project_dir or Path.cwd()
    if user_env_paths is None:
        user_env_paths = [user_env_path()]
    if project_env_paths is None:
        project_env_paths = [project_dir / ".env", project_dir / ".env.local"]

    merged: dict[str, str] = {}
    for path in [*user_env_paths, *project_env_paths]:
        merged.update(read_env_file(Path(path)))

    applied = [k for k in merged if k not in os.environ]
    for k in applied:
        os.environ[k] = merged[k]

    if applied:
        logger.debug("Loaded %d variable(s) from env files: %s", len(applied), ", ".join(applied))
    return applied
