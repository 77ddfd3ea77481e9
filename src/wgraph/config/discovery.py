"""Locating and reading ``wgraph.toml``.

Lookup order: an explicit ``--config`` path, then the ``WGRAPH_CONFIG`` env
var, then the nearest ``wgraph.toml`` in the start directory or one of its
parents. The file's directory becomes the workspace root.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "wgraph.toml"
CONFIG_ENV_VAR = "WGRAPH_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    A set ``WGRAPH_CONFIG`` short-circuits the walk, even when it names a
    file that does not exist.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    candidates = (d / CONFIG_FILENAME for d in (current, *current.parents))
    return next((c for c in candidates if c.is_file()), None)


def resolve_config(explicit: str | Path | None, start: Path | None = None) -> Path | None:
    """Pick the config file for a CLI run.

    An explicit path that is not a file disables discovery instead of
    falling back to it, so ``-c missing.toml`` runs on defaults.
    """
    if explicit:
        p = Path(explicit)
        return p if p.is_file() else None
    return find_config(start)


def read_config(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML; a syntax error becomes a ``ClickException``."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
