"""Blueprint model — a named collection of spec operations."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, Field

from .context import Context
from .specop import Ensure, SpecOp
from .specs import AnalyzersSpec, LangVersionSpec

logger = logging.getLogger(__name__)

DEFAULT_BLUEPRINT = "analyzers"


class Blueprint(BaseModel):
    """A named collection of spec operations, applied in order."""

    model_config = {"arbitrary_types_allowed": True}

    name: str
    ops: list[SpecOp[Any]] = Field(default_factory=list)

    def __iter__(self) -> Iterator[SpecOp[Any]]:
        return iter(self.ops)

    def __len__(self) -> int:
        return len(self.ops)

    def build(self, ctx: Context) -> int:
        """Execute all operations; returns how many changed the target."""
        logger.debug("Building blueprint '%s' (%d op(s))", self.name, len(self.ops))
        return sum(1 for op in self.ops if op(ctx))


def default_blueprint() -> Blueprint:
    """Reference the stock analyzer folder, then force the stock C# version."""
    return Blueprint(
        name=DEFAULT_BLUEPRINT,
        ops=[Ensure(AnalyzersSpec()), Ensure(LangVersionSpec())],
    )
