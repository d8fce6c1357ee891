"""Depth-bounded walk over the transitive requirement graph."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog

from modgraph.exceptions import ManifestError
from modgraph.manifest.models import ModFile
from modgraph.manifest.reader import read_manifest, read_root
from modgraph.resolver.locator import CacheLocator
from modgraph.resolver.models import UNLIMITED, ModuleIdentity

log = structlog.get_logger("modgraph.walker")


@runtime_checkable
class WalkSink(Protocol):
    """Receives walk events; decides what the output looks like."""

    def on_module(self, identity: ModuleIdentity, level: int) -> None:
        """A module was located (or is the root) and is about to be expanded."""

    def on_edge(self, parent: ModuleIdentity, child: ModuleIdentity) -> None:
        """*parent* declares a requirement on *child*."""

    def on_cutoff(self, identity: ModuleIdentity, level: int) -> None:
        """*identity* was reached with no depth budget left."""

    def on_unknown(self, identity: ModuleIdentity) -> None:
        """*identity* could not be located in the cache."""


def check_depth(max_depth: int) -> int:
    if max_depth != UNLIMITED and max_depth < 1:
        raise ValueError(
            f"max depth must be {UNLIMITED} or an integer greater than 0, got {max_depth}"
        )
    return max_depth


def _next_depth(remaining: int) -> int:
    return remaining if remaining == UNLIMITED else remaining - 1


class DependencyWalker:
    """Depth-first walk in declaration order, each identity expanded at most once.

    The depth check runs before the visited check, so a module reached with
    no budget left is reported through ``on_cutoff`` even if it was already
    expanded on another path. The walk uses an explicit stack; event order is
    the same as a recursive depth-first traversal.
    """

    def __init__(
        self,
        locator: CacheLocator,
        sink: WalkSink,
        read: Callable[[Path], ModFile] = read_manifest,
    ) -> None:
        self._locator = locator
        self._sink = sink
        self._read = read
        self.visited: set[str] = set()

    def walk(self, project_dir: Path, max_depth: int = UNLIMITED) -> ModuleIdentity:
        """Walk from the module rooted at *project_dir*.

        Root manifest errors (missing, unreadable, malformed) propagate.
        """
        check_depth(max_depth)
        root, mod_file = read_root(Path(project_dir))
        self.visited.add(root.key)
        self._sink.on_module(root, 0)
        self._run(self._children(root, mod_file, 0, max_depth))
        log.info("walker.done", root=root.key, visited=len(self.visited))
        return root

    def expand(self, identity: ModuleIdentity, level: int, remaining: int) -> None:
        """Expand *identity* and everything below it within *remaining* levels."""
        self._run([(None, identity, level, remaining)])

    # ── internals ────────────────────────────────────────────────────────

    @staticmethod
    def _children(
        parent: ModuleIdentity, mod_file: ModFile, level: int, remaining: int
    ) -> list[tuple[ModuleIdentity | None, ModuleIdentity, int, int]]:
        child_depth = _next_depth(remaining)
        return [
            (parent, ModuleIdentity(req.path, req.version), level + 1, child_depth)
            for req in mod_file.requires
        ]

    def _run(self, pending: list[tuple[ModuleIdentity | None, ModuleIdentity, int, int]]) -> None:
        stack = list(reversed(pending))
        while stack:
            parent, identity, level, remaining = stack.pop()
            if parent is not None:
                self._sink.on_edge(parent, identity)

            if remaining == 0:
                self._sink.on_cutoff(identity, level)
                continue
            if identity.key in self.visited:
                continue
            self.visited.add(identity.key)

            located = self._locator.locate(identity)
            if not located.found:
                self._sink.on_unknown(identity)
                continue

            self._sink.on_module(identity, level)
            try:
                mod_file = self._read(located.path)
            except ManifestError as e:
                log.debug("walker.manifest_skipped", module=identity.key, error=str(e))
                continue

            stack.extend(reversed(self._children(identity, mod_file, level, remaining)))
