"""Manifest parsing: the go.mod grammar and the readers built on it."""

# Ensure parsers are registered before any manifest is read.
from modgraph.manifest import go_mod  # noqa: F401
from modgraph.manifest.models import ModFile, Requirement
from modgraph.manifest.reader import read_manifest, read_root, root_module_name

__all__ = ["ModFile", "Requirement", "read_manifest", "read_root", "root_module_name"]
