"""Asset classifier — walk an analyzer folder and sort files by extension."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class AssetKind(StrEnum):
    ANALYZER = "analyzer"
    ADDITIONAL = "additional"
    RULESET = "ruleset"


# exact, case-sensitive suffixes
_KINDS: dict[str, AssetKind] = {
    ".dll": AssetKind.ANALYZER,
    ".json": AssetKind.ADDITIONAL,
    ".ruleset": AssetKind.RULESET,
}


class AssetEntry(BaseModel):
    """A discovered analyzer asset and its path relative to the project root."""

    model_config = {"frozen": True}

    kind: AssetKind
    path: str


def kind_of(path: str | Path) -> AssetKind | None:
    return _KINDS.get(Path(path).suffix)


def _walk(directory: Path) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(directory):
        dirnames.sort()
        for filename in sorted(filenames):
            yield Path(dirpath) / filename


def classify(directory: str | Path, relative_to: str | Path) -> Iterator[AssetEntry]:
    """Lazily yield an AssetEntry for every recognised file below `directory`.

    Files in a directory come in name order before its subdirectories.
    Unrecognised extensions are skipped. Symlinks are not resolved, so a linked
    package folder keeps its in-project path.
    """
    base = os.path.abspath(relative_to)
    for file in _walk(Path(directory)):
        kind = kind_of(file)
        if kind is None:
            logger.debug("Ignoring %s", file)
            continue
        path = os.path.relpath(os.path.abspath(file), base)
        logger.debug("Found %s asset %s", kind, path)
        yield AssetEntry(kind=kind, path=path)
