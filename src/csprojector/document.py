"""Project document — an lxml tree for a generated csproj and its property editor."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from lxml import etree

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'

_DECLARATION_PATTERN = re.compile(r"^\s*<\?xml[^>]*\?>")


def local_name(element: etree._Element) -> str:
    """Return the tag of an element without its namespace."""
    return etree.QName(element).localname


def condition(element: etree._Element) -> str | None:
    """Return the value of the Condition attribute, matched by local name."""
    for key, value in element.attrib.items():
        if etree.QName(key).localname == "Condition":
            return value
    return None


class ProjectDocument:
    """A parsed project descriptor whose root namespace is shared by new elements."""

    def __init__(self, tree: etree._ElementTree) -> None:
        self.tree = tree
        self.root = tree.getroot()
        self.namespace = etree.QName(self.root).namespace

    @classmethod
    def parse(cls, content: str) -> ProjectDocument:
        """Parse descriptor text; malformed XML raises XMLSyntaxError."""
        text = _DECLARATION_PATTERN.sub("", content.lstrip("\ufeff"), count=1)
        parser = etree.XMLParser(remove_blank_text=True)
        root = etree.fromstring(text, parser)
        return cls(root.getroottree())

    def qname(self, name: str) -> str:
        return etree.QName(self.namespace, name).text

    def element(self, name: str, text: str | None = None, **attrib: str) -> etree._Element:
        """Create a detached element in the document namespace."""
        el = etree.Element(self.qname(name), attrib, nsmap=self.root.nsmap)
        if text is not None:
            el.text = text
        return el

    def serialize(self) -> str:
        """Render the document with a fixed utf-8 declaration."""
        body = etree.tostring(self.tree, encoding="unicode", pretty_print=True)
        return f"{XML_DECLARATION}\n{body}"

    def __str__(self) -> str:
        return self.serialize()


def serialize(doc: ProjectDocument) -> str:
    return doc.serialize()


def value_of(element: etree._Element) -> str:
    return "".join(element.itertext())


def _set_value(element: etree._Element, value: str) -> None:
    for child in list(element):
        element.remove(child)
    element.text = value


def find_property(doc: ProjectDocument, name: str) -> etree._Element | None:
    """Return the first property element with this name inside any PropertyGroup."""
    group_tag = doc.qname("PropertyGroup")
    for el in doc.root.iter(doc.qname(name)):
        parent = el.getparent()
        if parent is not None and parent.tag == group_tag:
            return el
    return None


def get_property(doc: ProjectDocument, name: str) -> str | None:
    el = find_property(doc, name)
    return None if el is None else value_of(el)


def add_property(doc: ProjectDocument, name: str, value: str) -> etree._Element:
    """Add a property to the first root-level PropertyGroup without a condition.

    A new PropertyGroup is inserted as the first child of the root when no
    unconditioned group exists.
    """
    group = next(
        (pg for pg in doc.root.iterchildren(doc.qname("PropertyGroup")) if condition(pg) is None),
        None,
    )
    if group is None:
        logger.debug("Creating unconditioned PropertyGroup for '%s'", name)
        group = doc.element("PropertyGroup")
        doc.root.insert(0, group)

    logger.debug("Adding project property %s. Value: %s", name, value)
    prop = doc.element(name, value)
    group.append(prop)
    return prop


def set_or_update(doc: ProjectDocument, name: str, updater: Callable[[str], str]) -> None:
    """Ensure property `name` holds `updater(current)`, adding it when missing."""
    el = find_property(doc, name)
    if el is None:
        add_property(doc, name, updater(""))
        return

    current = value_of(el)
    result = updater(current)
    if result != current:
        logger.info(
            "Overriding existing project property %s. Old value: %s, new value: %s",
            name,
            current,
            result,
        )
        _set_value(el, result)
    else:
        logger.info("Property %s already set. Old value: %s, new value: %s", name, current, result)


def remove_property(doc: ProjectDocument, name: str) -> int:
    """Remove every property element with this name; returns the count removed."""
    group_tag = doc.qname("PropertyGroup")
    matches = [
        el
        for el in doc.root.iter(doc.qname(name))
        if (parent := el.getparent()) is not None and parent.tag == group_tag
    ]
    for el in matches:
        el.getparent().remove(el)
    if matches:
        logger.info("Removed %d project property element(s) %s", len(matches), name)
    return len(matches)
