"""Custom exceptions for modgraph."""

from __future__ import annotations


class ModGraphError(Exception):
    """Base exception for all modgraph errors."""


class ProjectRootError(ModGraphError):
    """Raised when the project root cannot be established."""


class ManifestError(ModGraphError):
    """Base for go.mod problems: the file is missing, unreadable, or malformed."""

    def __init__(self, message: str, path: str, line: int | None = None):
        self.path = path
        self.line = line
        location = f"{path}:{line}" if line is not None else path
        super().__init__(f"{location}: {message}")


class ManifestMissingError(ManifestError):
    """Raised when a directory has no go.mod."""

    def __init__(self, path: str):
        super().__init__("go.mod is not present in this directory", path)


class ManifestParseError(ManifestError):
    """Raised when a go.mod cannot be read or parsed."""
