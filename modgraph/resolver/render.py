"""Walk sinks that accumulate state and render it: JSON graph or text tree."""

from __future__ import annotations

import structlog
from pydantic import BaseModel, Field

from modgraph.resolver.models import ModuleIdentity

log = structlog.get_logger("modgraph.render")

INDENT = "  "


class GraphDocument(BaseModel):
    """Deduplicated graph: requirer -> sorted dependency indexes."""

    packages: dict[str, list[int]] = Field(default_factory=dict)
    indexes: list[str] = Field(default_factory=list)
    unknown: list[str] = Field(default_factory=list)


class GraphAccumulator:
    """Collect edges as indexes into a first-seen node table."""

    def __init__(self) -> None:
        self.packages: dict[str, set[int]] = {}
        self.indexes: dict[str, int] = {}
        self.unknown: list[str] = []

    def index_of(self, identity: ModuleIdentity) -> int:
        key = identity.display
        if key not in self.indexes:
            self.indexes[key] = len(self.indexes)
        return self.indexes[key]

    def on_module(self, identity: ModuleIdentity, level: int) -> None:
        self.packages.setdefault(identity.display, set())

    def on_edge(self, parent: ModuleIdentity, child: ModuleIdentity) -> None:
        index = self.index_of(child)
        self.packages.setdefault(parent.display, set()).add(index)

    def on_cutoff(self, identity: ModuleIdentity, level: int) -> None:
        # The parent's edge already references this node.
        pass

    def on_unknown(self, identity: ModuleIdentity) -> None:
        if identity.display not in self.unknown:
            self.unknown.append(identity.display)

    def document(self) -> GraphDocument:
        packages: dict[str, list[int]] = {}
        for name, deps in self.packages.items():
            if not deps:
                log.warning("no dependencies found for package", package=name)
            packages[name] = sorted(deps)
        return GraphDocument(
            packages=packages,
            indexes=sorted(self.indexes, key=self.indexes.__getitem__),
            unknown=list(self.unknown),
        )

    def render(self) -> str:
        return self.document().model_dump_json(indent=2)


_DIRECT_BANNER = "Direct dependencies:"
_UNKNOWN_BANNER = "Transient (not local / not compiled in) dependencies:"


def _banner(title: str) -> list[str]:
    rule = "-" * len(title)
    return [rule, title, rule]


class TreeWriter:
    """Indented traversal lines plus a flat list of modules not found locally."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.unknown: list[str] = []

    def _write(self, identity: ModuleIdentity, level: int) -> None:
        self.lines.append(INDENT * level + identity.display)

    def on_module(self, identity: ModuleIdentity, level: int) -> None:
        self._write(identity, level)

    def on_edge(self, parent: ModuleIdentity, child: ModuleIdentity) -> None:
        pass

    def on_cutoff(self, identity: ModuleIdentity, level: int) -> None:
        self._write(identity, level)

    def on_unknown(self, identity: ModuleIdentity) -> None:
        self.unknown.append(identity.display)

    def render(self) -> str:
        out = _banner(_DIRECT_BANNER)
        out.extend(self.lines)
        out.append("")
        out.extend(_banner(_UNKNOWN_BANNER))
        out.extend(self.unknown)
        return "\n".join(out) + "\n"
