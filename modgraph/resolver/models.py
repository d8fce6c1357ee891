"""Data models shared by the locator, walker, and renderers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Depth value meaning "no limit". Never decremented.
UNLIMITED = -1


def strip_comment(text: str) -> str:
    """Drop a trailing ``//`` comment from an identity line."""
    return text.split(" //", 1)[0]


@dataclass(frozen=True)
class ModuleIdentity:
    """A node in the walk: module path plus the raw declared version.

    The root module has an empty version. Equality is exact string equality,
    so ``v1.2.3`` and ``v1.2.3+incompatible`` are different nodes.
    """

    name: str
    version: str = ""

    @property
    def key(self) -> str:
        return f"{self.name} {self.version}" if self.version else self.name

    @property
    def display(self) -> str:
        return strip_comment(self.key)

    @classmethod
    def parse(cls, raw: str) -> ModuleIdentity:
        """Build an identity from ``name``, ``name version`` or ``name@version``."""
        raw = strip_comment(raw.strip())
        if "@" in raw:
            name, _, version = raw.partition("@")
        else:
            name, _, version = raw.partition(" ")
        return cls(name=name, version=version.strip())

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class LocateResult:
    """Outcome of a cache lookup."""

    path: Path | None
    found: bool
    layout: str | None = None
