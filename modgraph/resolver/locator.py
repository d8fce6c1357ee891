"""Locate a dependency's source tree inside the local module cache."""

from __future__ import annotations

import os
import re
from pathlib import Path

import structlog

from modgraph.resolver.models import LocateResult, ModuleIdentity

log = structlog.get_logger("modgraph.locator")

_SEMVER_RE = re.compile(r"v\d+\.\d+\.\d+")


def escape_module_path(name: str) -> str:
    """Case-encode a path the way the module cache stores it.

    Every uppercase letter becomes ``!`` followed by its lowercase form, so
    ``github.com/Foo/bar`` is stored as ``github.com/!foo/bar``.
    """
    return "".join("!" + ch.lower() if ch.lower() != ch else ch for ch in name)


def extract_semver(version: str) -> str:
    """Return the first ``vMAJOR.MINOR.PATCH`` in *version*, or ``""``."""
    match = _SEMVER_RE.search(version)
    return match.group(0) if match else ""


def _exists(path: Path) -> bool:
    # Anything other than "does not exist" (e.g. permission denied) counts
    # as present; the manifest read that follows reports the real problem.
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError:
        return True
    return True


class CacheLocator:
    """Map a module identity onto a directory under a GOPATH-style cache root.

    Search order:
      1. ``src/<name>``                    (legacy GOPATH checkout)
      2. ``pkg/mod/<name>@<semver>``       (clean semver taken from the version)
      3. ``pkg/mod/<name>@<version>``      (raw version, for pseudo-versions)

    Nothing is created or fetched.
    """

    def __init__(self, cache_root: Path):
        self.cache_root = Path(cache_root)

    def candidates(self, identity: ModuleIdentity | str) -> list[tuple[str, Path]]:
        """Candidate (layout, path) pairs in priority order, duplicates removed."""
        if isinstance(identity, str):
            identity = ModuleIdentity.parse(identity)
        name = escape_module_path(identity.name)
        version = escape_module_path(identity.version)
        mod_root = self.cache_root / "pkg" / "mod"

        ordered = [
            ("src", self.cache_root / "src" / name),
            ("semver", mod_root / f"{name}@{extract_semver(version)}"),
            ("raw", mod_root / f"{name}@{version}"),
        ]
        seen: set[Path] = set()
        unique: list[tuple[str, Path]] = []
        for layout, path in ordered:
            if path in seen:
                continue
            seen.add(path)
            unique.append((layout, path))
        return unique

    def locate(self, identity: ModuleIdentity | str) -> LocateResult:
        for layout, path in self.candidates(identity):
            if _exists(path):
                log.debug("locator.hit", identity=str(identity), layout=layout, path=str(path))
                return LocateResult(path=path, found=True, layout=layout)
            log.debug("locator.miss", identity=str(identity), layout=layout, path=str(path))
        return LocateResult(path=None, found=False)
