"""Data models for parsed manifests."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Requirement:
    """A single ``require`` entry, in declaration order."""

    path: str
    version: str
    indirect: bool = False


@dataclass
class ModFile:
    """The parts of a go.mod the walker cares about."""

    module: str
    go_version: str | None = None
    requires: list[Requirement] = field(default_factory=list)
