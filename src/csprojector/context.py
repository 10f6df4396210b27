"""Runtime execution context for a generation pass."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class Context[P]:
    """Runtime state passed through the build chain.

    `cache` holds values computed once per pass, such as discovered assets.
    """

    def __init__(self, target: P, *, root: str | Path, dry_run: bool = False) -> None:
        self.target = target
        self.root = Path(root)
        self.dry_run = dry_run
        self.cache: dict[Any, Any] = {}
