"""Manifest reader — load go.mod files from disk."""

from __future__ import annotations

from pathlib import Path

import structlog

from modgraph.exceptions import ManifestMissingError, ManifestParseError
from modgraph.manifest import go_mod  # noqa: F401
from modgraph.manifest.models import ModFile
from modgraph.manifest.registry import get_parser
from modgraph.resolver.models import ModuleIdentity

log = structlog.get_logger("modgraph.manifest")

MANIFEST_NAME = "go.mod"


def read_manifest(directory: Path) -> ModFile:
    """Read and parse ``<directory>/go.mod``.

    Raises:
        ManifestMissingError: the file does not exist.
        ManifestParseError: the file cannot be read or is malformed.
    """
    mod_path = Path(directory) / MANIFEST_NAME
    try:
        content = mod_path.read_text(encoding="utf-8", errors="replace")
    except (FileNotFoundError, NotADirectoryError, IsADirectoryError) as e:
        raise ManifestMissingError(str(Path(directory))) from e
    except OSError as e:
        raise ManifestParseError(f"cannot read: {e.strerror or e}", str(mod_path)) from e
    return get_parser(MANIFEST_NAME).parse(mod_path, content)


def root_module_name(project_dir: Path, mod_file: ModFile) -> str:
    """Name of the module rooted at *project_dir*.

    When *project_dir* sits below a checkout of the declared module inside a
    GOPATH-style tree, e.g. ``/go/src/example.com/a/cmd/x`` for module
    ``example.com/a``, the remainder is appended: ``example.com/a/cmd/x``.
    """
    declared = mod_file.module
    project = Path(project_dir).as_posix()
    if project.endswith(declared):
        return declared
    head, sep, tail = project.partition(declared + "/")
    if sep and head.endswith("/"):
        return declared + "/" + tail
    return declared


def read_root(project_dir: Path) -> tuple[ModuleIdentity, ModFile]:
    """Read the root manifest and derive the root identity. Errors propagate."""
    mod_file = read_manifest(project_dir)
    identity = ModuleIdentity(root_module_name(project_dir, mod_file))
    log.debug(
        "manifest.root",
        module=identity.name,
        requires=len(mod_file.requires),
        path=str(project_dir),
    )
    return identity, mod_file
