"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, wgraph.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    path: str = "graph.json"
    default_weight: float = Field(default=1.0, ge=0, allow_inf_nan=False)


class SnapshotConfig(BaseModel):
    """[snapshot] section."""

    model_config = {"frozen": True}

    indent: int | None = 2
    atomic: bool = True

