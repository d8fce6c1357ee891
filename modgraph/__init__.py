"""modgraph: static Go module dependency graphs from the local module cache."""

__version__ = "1.2.1"

from modgraph.exceptions import (  # noqa: E402
    ManifestError,
    ManifestMissingError,
    ManifestParseError,
    ModGraphError,
    ProjectRootError,
)
from modgraph.manifest import ModFile, Requirement, read_manifest, read_root  # noqa: E402
from modgraph.resolver.locator import CacheLocator, escape_module_path, extract_semver  # noqa: E402
from modgraph.resolver.models import UNLIMITED, LocateResult, ModuleIdentity  # noqa: E402
from modgraph.resolver.render import GraphAccumulator, GraphDocument, TreeWriter  # noqa: E402
from modgraph.resolver.walker import DependencyWalker, WalkSink  # noqa: E402

__all__ = [
    "UNLIMITED",
    "CacheLocator",
    "DependencyWalker",
    "GraphAccumulator",
    "GraphDocument",
    "LocateResult",
    "ManifestError",
    "ManifestMissingError",
    "ManifestParseError",
    "ModFile",
    "ModGraphError",
    "ModuleIdentity",
    "ProjectRootError",
    "Requirement",
    "TreeWriter",
    "WalkSink",
    "escape_module_path",
    "extract_semver",
    "read_manifest",
    "read_root",
]
