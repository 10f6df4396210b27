"""Built-in project document specs."""

from __future__ import annotations

import logging

from .assets import AssetEntry, AssetKind, classify
from .context import Context
from .document import ProjectDocument, get_property, remove_property, set_or_update
from .langversion import (
    CONFIGURATION_MARKER,
    scoped_groups,
    stamp_version,
    unstamp_version,
    version_stamped,
)
from .paths import resolve
from .references import (
    RULESET_PROPERTY,
    inject,
    referenced,
    remove_references,
    set_ruleset,
)
from .spec import Specification, spec

logger = logging.getLogger(__name__)

DEFAULT_ANALYZER_PATH = "Packages/com.bovinelabs.analyzers/Analyzers/RoslynAnalyzers"
DEFAULT_LANG_VERSION = "7.3"


@spec("property")
class PropertySpec(Specification[ProjectDocument]):
    """A global property with a fixed value."""

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = str(value)

    def equals(self, ctx: Context[ProjectDocument]) -> bool:
        return get_property(ctx.target, self.name) == self.value

    def exists(self, ctx: Context[ProjectDocument]) -> bool:
        return get_property(ctx.target, self.name) is not None

    def apply(self, ctx: Context[ProjectDocument]) -> None:
        set_or_update(ctx.target, self.name, lambda _: self.value)

    def remove(self, ctx: Context[ProjectDocument]) -> None:
        remove_property(ctx.target, self.name)


@spec("analyzers")
class AnalyzersSpec(Specification[ProjectDocument]):
    """Every asset in an analyzer folder referenced by the project.

    A missing folder is reported once and treated as nothing to do.
    """

    def __init__(self, path: str = DEFAULT_ANALYZER_PATH) -> None:
        self.path = path

    def _entries(self, ctx: Context[ProjectDocument]) -> list[AssetEntry] | None:
        """Classify the folder once per pass; None when it is missing."""
        key = (type(self), self.path)
        if key not in ctx.cache:
            directory = resolve(ctx.root, self.path)
            ctx.cache[key] = None if directory is None else list(classify(directory, ctx.root))
        return ctx.cache[key]

    def equals(self, ctx: Context[ProjectDocument]) -> bool:
        entries = self._entries(ctx)
        if entries is None:
            return True

        present = referenced(ctx.target)
        rulesets = [e.path for e in entries if e.kind is AssetKind.RULESET]
        if rulesets and get_property(ctx.target, RULESET_PROPERTY) != rulesets[-1]:
            return False
        return all(e.path in present for e in entries if e.kind is not AssetKind.RULESET)

    def exists(self, ctx: Context[ProjectDocument]) -> bool:
        entries = self._entries(ctx)
        if not entries:
            return False
        present = referenced(ctx.target)
        return any(e.path in present for e in entries)

    def apply(self, ctx: Context[ProjectDocument]) -> None:
        entries = self._entries(ctx)
        if entries is None:
            return
        present = referenced(ctx.target)
        pending = [e for e in entries if e.kind is AssetKind.RULESET or e.path not in present]
        if any(e.kind is not AssetKind.RULESET for e in pending):
            inject(ctx.target, pending)
            return
        # only the ruleset changed; no empty ItemGroup
        for entry in pending:
            set_ruleset(ctx.target, entry.path)

    def remove(self, ctx: Context[ProjectDocument]) -> None:
        entries = self._entries(ctx) or []
        count = remove_references(ctx.target, (e.path for e in entries))
        logger.debug("Removed %d analyzer reference(s)", count)


@spec("lang_version")
class LangVersionSpec(Specification[ProjectDocument]):
    """A LangVersion stamped on every configuration+platform group."""

    def __init__(self, version: str = DEFAULT_LANG_VERSION, marker: str = CONFIGURATION_MARKER) -> None:
        self.version = str(version)
        self.marker = marker

    def equals(self, ctx: Context[ProjectDocument]) -> bool:
        return version_stamped(ctx.target, self.version, self.marker)

    def exists(self, ctx: Context[ProjectDocument]) -> bool:
        return any(
            group.find(ctx.target.qname("LangVersion")) is not None
            for group in scoped_groups(ctx.target, self.marker)
        )

    def apply(self, ctx: Context[ProjectDocument]) -> None:
        stamp_version(ctx.target, self.version, self.marker)

    def remove(self, ctx: Context[ProjectDocument]) -> None:
        unstamp_version(ctx.target, self.marker)

