"""Reference injector — add analyzer assets to a project document."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .assets import AssetEntry, AssetKind
from .document import ProjectDocument, set_or_update

logger = logging.getLogger(__name__)

RULESET_PROPERTY = "CodeAnalysisRuleSet"

_ITEM_NAMES: dict[AssetKind, str] = {
    AssetKind.ANALYZER: "Analyzer",
    AssetKind.ADDITIONAL: "AdditionalFiles",
}


def inject(doc: ProjectDocument, entries: Iterable[AssetEntry]) -> None:
    """Append one new ItemGroup referencing the entries.

    Ruleset entries update the CodeAnalysisRuleSet property instead; the last
    one wins.
    """
    item_group = doc.element("ItemGroup")

    for entry in entries:
        if entry.kind is AssetKind.RULESET:
            set_ruleset(doc, entry.path)
            continue
        logger.debug("Referencing %s as %s", entry.path, _ITEM_NAMES[entry.kind])
        item_group.append(doc.element(_ITEM_NAMES[entry.kind], Include=entry.path))

    logger.info("Adding ItemGroup with %d analyzer reference(s)", len(item_group))
    doc.root.append(item_group)


def set_ruleset(doc: ProjectDocument, path: str) -> None:
    set_or_update(doc, RULESET_PROPERTY, lambda _: path)


def referenced(doc: ProjectDocument) -> set[str]:
    """Return the Include paths of every analyzer and additional-file item."""
    paths: set[str] = set()
    for item_name in _ITEM_NAMES.values():
        for el in doc.root.iter(doc.qname(item_name)):
            if (include := el.get("Include")) is not None:
                paths.add(include)
    return paths


def remove_references(doc: ProjectDocument, paths: Iterable[str]) -> int:
    """Remove items including any of `paths` and drop ItemGroups left empty."""
    targets = set(paths)
    removed = 0
    for item_name in _ITEM_NAMES.values():
        for el in list(doc.root.iter(doc.qname(item_name))):
            if el.get("Include") not in targets:
                continue
            parent = el.getparent()
            parent.remove(el)
            removed += 1
            if parent.tag == doc.qname("ItemGroup") and len(parent) == 0:
                parent.getparent().remove(parent)
    return removed
