"""Language-version stamper for configuration+platform property groups."""

from __future__ import annotations

import logging

from lxml import etree

from .document import ProjectDocument, condition, local_name, value_of

logger = logging.getLogger(__name__)

CONFIGURATION_MARKER = "'$(Configuration)|$(Platform)'"


def scoped_groups(doc: ProjectDocument, marker: str = CONFIGURATION_MARKER) -> list[etree._Element]:
    """Return PropertyGroups whose Condition contains `marker` verbatim."""
    return [
        el
        for el in doc.root.iterdescendants(etree.Element)
        if local_name(el) == "PropertyGroup" and marker in (condition(el) or "")
    ]


def stamp_version(doc: ProjectDocument, version: str, marker: str = CONFIGURATION_MARKER) -> int:
    """Append a LangVersion element to every scoped group.

    Existing LangVersion elements are not checked, so repeated calls append
    again. Returns the number of groups stamped.
    """
    groups = scoped_groups(doc, marker)
    for group in groups:
        group.append(doc.element("LangVersion", version))
    logger.debug("Stamped LangVersion %s on %d property group(s)", version, len(groups))
    return len(groups)


def version_stamped(doc: ProjectDocument, version: str, marker: str = CONFIGURATION_MARKER) -> bool:
    """True when the last LangVersion of every scoped group equals `version`."""
    for group in scoped_groups(doc, marker):
        stamps = group.findall(doc.qname("LangVersion"))
        if not stamps or value_of(stamps[-1]) != version:
            return False
    return True


def unstamp_version(doc: ProjectDocument, marker: str = CONFIGURATION_MARKER) -> int:
    """Remove LangVersion elements from every scoped group."""
    removed = 0
    for group in scoped_groups(doc, marker):
        for el in group.findall(doc.qname("LangVersion")):
            group.remove(el)
            removed += 1
    return removed
