"""Locate the analyzer folder below a project root."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def resolve(root: str | Path, relative_path: str | Path) -> Path | None:
    """Return the absolute analyzer directory, or None when it does not exist.

    The path is made absolute lexically; symlinks below the root are kept so
    references stay inside the project.
    """
    directory = Path(os.path.abspath(Path(root) / relative_path))
    if not directory.is_dir():
        logger.warning(
            "Directory %s does not exist, please place analyzers in correct location.",
            directory,
        )
        return None
    return directory
