"""SpecOp strategies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from .context import Context
from .spec import Specification

logger = logging.getLogger(__name__)


class SpecOp[P](ABC):
    """Wraps a Specification with conditional execution logic.

    Calling an op returns True when the target was (or, in a dry run, would
    have been) changed.
    """

    def __init__(self, spec: Specification[P]) -> None:
        self.spec = spec

    @abstractmethod
    def __call__(self, ctx: Context[P]) -> bool: ...

    def _perform(self, ctx: Context[P], *, remove: bool = False) -> bool:
        """Apply or remove the spec unless this is a dry run."""
        if ctx.dry_run:
            logger.info("[DRY RUN] Would %s %r", "remove" if remove else "apply", self.spec)
        elif remove:
            logger.info("Removing %r", self.spec)
            self.spec.remove(ctx)
        else:
            logger.info("Applying %r", self.spec)
            self.spec.apply(ctx)
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.spec!r})"


class Present[P](SpecOp[P]):
    """Apply only if resource doesn't exist."""

    def __call__(self, ctx: Context[P]) -> bool:
        if self.spec.exists(ctx):
            logger.debug("Skipping %r; already exists", self.spec)
            return False
        return self._perform(ctx)


class Ensure[P](SpecOp[P]):
    """Apply if current state doesn't match."""

    def __call__(self, ctx: Context[P]) -> bool:
        if self.spec.equals(ctx):
            logger.debug("Skipping %r; up to date", self.spec)
            return False
        return self._perform(ctx)


class Absent[P](SpecOp[P]):
    """Remove if resource exists."""

    def __call__(self, ctx: Context[P]) -> bool:
        if not self.spec.exists(ctx):
            logger.debug("Skipping removal of %r; not present", self.spec)
            return False
        return self._perform(ctx, remove=True)


STRATEGIES: dict[str, type[SpecOp]] = {
    "present": Present,
    "ensure": Ensure,
    "absent": Absent,
}
