"""Locate the touilledo.toml config file.

``TOUILLEDO_CONFIG`` names the file explicitly; otherwise the directories
from the start point up to the filesystem root are searched, nearest first.
"""

from __future__ import annotations

import os
from pathlib import Path

import click

CONFIG_FILENAME = "touilledo.toml"
CONFIG_ENV_VAR = "TOUILLEDO_CONFIG"


def require_config_file(path: Path, source: str) -> Path:
    """Return *path* if it is a file, else fail naming where it came from."""
    if not path.is_file():
        raise click.ClickException(f"Config file {str(path)!r} from {source} does not exist")
    return path


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for a run started in *start* (default: cwd).

    Raises ``click.ClickException`` when ``TOUILLEDO_CONFIG`` points at a
    missing file. Returns None when no touilledo.toml is found.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return require_config_file(Path(env_path), CONFIG_ENV_VAR)

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
