"""Pydantic models describing a generation run."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from g2io.core.graph import EdgeKind

SEED_UPPER_BOUND = 2**64


class GenerationConfig(BaseModel):
    """
    Everything needed to produce one inner/outer graph.

    Plugin fields hold the strings resolved by the registries, e.g.
    ``"chain/3"`` or ``"random/0.5"``.  Their parameters are checked when the
    plugins are resolved, not here.
    """
    model_config = ConfigDict(frozen=True)

    outer: str = Field(..., description="Outer graph generator, e.g. 'chain/3'")
    inner: str = Field(..., description="Inner graph generator, e.g. 'tree/7'")
    linker: str = Field(..., description="Linker, e.g. 'first' or 'random/0.1'")
    edge_kind: EdgeKind = EdgeKind.DIRECTED
    display: str = Field(default="graphml", description="Display engine, e.g. 'dot'")
    seed: Optional[int] = Field(
        default=None,
        ge=0,
        lt=SEED_UPPER_BOUND,
        description="64-bit seed; drawn from OS entropy when omitted",
    )
    workers: Optional[int] = Field(
        default=None,
        ge=1,
        description="Thread pool size; does not change the output",
    )

    @field_validator("outer", "inner", "linker", "display")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("plugin string must not be blank")
        return value
