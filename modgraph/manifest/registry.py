"""Parser registry — match manifest file names to parsers."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from modgraph.manifest.models import ModFile


@runtime_checkable
class ManifestParser(Protocol):
    """Interface that every manifest parser must satisfy."""

    file_name: str

    def parse(self, file_path: Path, content: str) -> ModFile: ...


PARSER_REGISTRY: dict[str, ManifestParser] = {}


def register_parser(parser: ManifestParser) -> None:
    """Register a parser instance by the manifest file name it handles."""
    PARSER_REGISTRY[parser.file_name] = parser


def get_parser(file_name: str) -> ManifestParser:
    try:
        return PARSER_REGISTRY[file_name]
    except KeyError:
        raise LookupError(f"no manifest parser registered for {file_name!r}") from None
