"""Workspace — project configurations parsed from HCL files."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Any, overload

from . import hcl
from .blueprints import DEFAULT_BLUEPRINT, Blueprint, default_blueprint
from .projects import Project
from .spec import _spec_registry
from .specop import STRATEGIES, SpecOp

logger = logging.getLogger(__name__)


def _decode_spec(spec_name: str, attrs: dict[str, Any]) -> Any:
    """Decode a spec block into a Specification instance using the registry."""
    if spec_name not in _spec_registry:
        raise ValueError(f"Unknown spec type: '{spec_name}'")
    spec_cls = _spec_registry[spec_name]
    logger.debug("Decoding spec '%s' -> %s", spec_name, spec_cls.__name__)
    return spec_cls(**{k: hcl.interpolate(v) for k, v in attrs.items()})


def _parse_ops(block_data: dict[str, Any]) -> list[SpecOp]:
    """Parse strategy blocks (present/ensure/absent) from a blueprint or project block.

    HCL2 structure for strategy blocks:
        {"ensure": [{"property": {"name": "Nullable", "value": "enable"}}, ...], ...}
    """
    ops: list[SpecOp] = []
    for strategy_name, strategy_cls in STRATEGIES.items():
        for spec_block in block_data.get(strategy_name, []):
            for spec_name, attrs in spec_block.items():
                ops.append(strategy_cls(_decode_spec(spec_name, dict(attrs))))
    return ops


def _resolve_blueprint(
    name: str,
    pending: dict[str, dict[str, Any]],
    resolved: dict[str, Blueprint],
    resolving: set[str],
) -> Blueprint:
    """Recursively resolve a single blueprint, handling includes."""
    if name in resolved:
        return resolved[name]
    if name in resolving:
        raise ValueError(f"Circular include detected: '{name}'")
    if name not in pending:
        if name == DEFAULT_BLUEPRINT:
            resolved[name] = default_blueprint()
            return resolved[name]
        raise ValueError(f"Unknown blueprint: '{name}'")
    logger.debug("Resolving blueprint '%s'", name)
    resolving.add(name)

    bp_data = pending[name]
    ops: list[SpecOp] = []

    # includes run before the blueprint's own ops
    for include_name in bp_data.get("include", []):
        logger.debug("Blueprint '%s' includes '%s'", name, include_name)
        ops.extend(_resolve_blueprint(include_name, pending, resolved, resolving).ops)

    ops.extend(_parse_ops(bp_data))

    bp = Blueprint(name=name, ops=ops)
    resolved[name] = bp
    resolving.discard(name)
    return bp


def _build_project(
    name: str,
    data: dict[str, Any],
    pending: dict[str, dict[str, Any]],
    resolved: dict[str, Blueprint],
) -> Project:
    """Build a single Project from parsed data."""
    logger.debug("Building project '%s'", name)
    blueprints: list[Blueprint] = []
    for bp_name in data.get("use", []):
        if bp_name not in pending and bp_name != DEFAULT_BLUEPRINT:
            raise ValueError(f"Project '{name}' references unknown blueprint: '{bp_name}'")
        blueprints.append(_resolve_blueprint(bp_name, pending, resolved, set()))

    inline_ops = _parse_ops(data)
    if inline_ops:
        blueprints.append(Blueprint(name=f"{name}:inline", ops=inline_ops))

    return Project(
        name=name,
        description=data.get("description", ""),
        blueprints=blueprints,
    )


class Workspace(Mapping[str, Project]):
    """Blueprint and project blocks accumulated from HCL files.

    Projects are resolved on access, so blueprints may be loaded after the
    projects that use them.
    """

    def __init__(self, *, context: dict[str, Any] | None = None) -> None:
        self._context = context
        self._pending_blueprints: dict[str, dict[str, Any]] = {}
        self._pending_projects: dict[str, dict[str, Any]] = {}

    def load(self, path: str | Path) -> None:
        """Parse one HCL file and register its blocks."""
        self.load_data(hcl.load(Path(path), context=self._context))

    def scan(self, path: str | Path, *, recurse: bool = True) -> None:
        """Load every .hcl file in a directory, in name order."""
        pattern = "**/*.hcl" if recurse else "*.hcl"
        for file in sorted(Path(path).glob(pattern)):
            logger.debug("Loading %s", file)
            self.load(file)

    def load_data(self, data: dict[str, Any]) -> None:
        """Extract blueprint and project blocks from a parsed data dict.

        Raises ValueError if any blueprint or project name is already loaded.
        """
        for bp_block in data.get("blueprint", []):
            for bp_name, bp_data in bp_block.items():
                if bp_name in self._pending_blueprints:
                    raise ValueError(f"Duplicate blueprint: '{bp_name}'")
                logger.debug("Found blueprint '%s'", bp_name)
                self._pending_blueprints[bp_name] = bp_data

        for proj_block in data.get("project", []):
            for proj_name, proj_data in proj_block.items():
                if proj_name in self._pending_projects:
                    raise ValueError(f"Duplicate project: '{proj_name}'")
                logger.debug("Found project '%s'", proj_name)
                self._pending_projects[proj_name] = proj_data

    def _resolve(self) -> dict[str, Project]:
        """Resolve all pending blueprints and build project instances."""
        logger.debug(
            "Resolving %d blueprint(s) and %d project(s)",
            len(self._pending_blueprints),
            len(self._pending_projects),
        )
        resolved: dict[str, Blueprint] = {}
        for name in self._pending_blueprints:
            _resolve_blueprint(name, self._pending_blueprints, resolved, set())

        return {
            name: _build_project(name, data, self._pending_blueprints, resolved)
            for name, data in self._pending_projects.items()
        }

    def match(self, name: str) -> Project | None:
        """Return the project named `name`, else the first whose glob pattern matches it."""
        projects = self._resolve()
        if name in projects:
            return projects[name]
        for pattern, project in projects.items():
            if fnmatchcase(name, pattern):
                logger.debug("Project '%s' matched pattern '%s'", name, pattern)
                return project
        return None

    def __getitem__(self, name: str) -> Project:
        return self._resolve()[name]

    def __contains__(self, name: object) -> bool:
        return name in self._pending_projects

    def __iter__(self) -> Iterator[str]:
        return iter(self._pending_projects)

    def __len__(self) -> int:
        return len(self._pending_projects)

    @overload
    def get(self, name: str) -> Project | None: ...
    @overload
    def get(self, name: str, default: Project) -> Project: ...
    def get(self, name: str, default: Any = None) -> Project | None:
        return self._resolve().get(name, default)

    def __repr__(self) -> str:
        bp_count = len(self._pending_blueprints)
        proj_count = len(self._pending_projects)
        return f"Workspace(blueprints={bp_count}, projects={proj_count})"
