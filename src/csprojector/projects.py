"""Project model — the generation target for one project descriptor."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from .blueprints import Blueprint
from .context import Context
from .document import ProjectDocument

logger = logging.getLogger(__name__)


class Project(BaseModel):
    """Blueprints to run against the descriptor of a named project."""

    model_config = {"arbitrary_types_allowed": True}

    name: str
    description: str = ""
    blueprints: list[Blueprint] = Field(default_factory=list)

    def build(self, document: ProjectDocument, *, root: str | Path, dry_run: bool = False) -> int:
        """Run all blueprints against a parsed document; returns the change count."""
        ctx = Context(target=document, root=root, dry_run=dry_run)
        logger.info("Building project '%s'", self.name)
        changes = sum(blueprint.build(ctx) for blueprint in self.blueprints)
        logger.debug("Project '%s' finished with %d change(s)", self.name, changes)
        return changes

    def generate(self, content: str, *, root: str | Path, dry_run: bool = False) -> str:
        """Parse descriptor text, build it and serialize the result."""
        document = ProjectDocument.parse(content)
        self.build(document, root=root, dry_run=dry_run)
        return document.serialize()
