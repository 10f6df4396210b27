"""Host hook — the (project name, descriptor text) -> text entry point."""

from __future__ import annotations

import logging
from pathlib import Path

from .blueprints import default_blueprint
from .projects import Project
from .workspace import Workspace

logger = logging.getLogger(__name__)


class ProjectFileHook:
    """Callable that post-processes generated project descriptors.

    Hosts register an instance wherever they expose a project-file
    generation callback. Configured projects are selected by name; anything
    unmatched gets the default analyzer blueprint.
    """

    def __init__(
        self,
        root: str | Path,
        workspace: Workspace | None = None,
        *,
        dry_run: bool = False,
    ) -> None:
        self.root = Path(root)
        self.workspace = workspace
        self.dry_run = dry_run

    def project_for(self, name: str) -> Project:
        if self.workspace is not None:
            project = self.workspace.match(name)
            if project is not None:
                return project
        logger.debug("No configuration for '%s'; using default blueprint", name)
        return Project(name=name, blueprints=[default_blueprint()])

    def __call__(self, name: str, content: str) -> str:
        return self.project_for(name).generate(content, root=self.root, dry_run=self.dry_run)


def generate(name: str, content: str, root: str | Path) -> str:
    """Post-process one descriptor with the default analyzer blueprint."""
    return ProjectFileHook(root)(name, content)
