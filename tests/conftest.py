"""Shared pytest fixtures: fake Go projects and GOPATH module caches."""

from __future__ import annotations

from pathlib import Path

import pytest

from modgraph.resolver.locator import CacheLocator, escape_module_path


def go_mod(module: str, *requires: str) -> str:
    """Render a go.mod with a require block; each entry is ``"path version"``."""
    lines = [f"module {module}", "", "go 1.21", ""]
    if requires:
        lines.append("require (")
        lines.extend(f"\t{r}" for r in requires)
        lines.append(")")
    return "\n".join(lines) + "\n"


class FakeGopath:
    """A GOPATH tree under tmp_path with helpers to drop modules into it."""

    def __init__(self, root: Path):
        self.root = root
        (root / "pkg" / "mod").mkdir(parents=True)

    def add_module(self, name: str, version: str, *requires: str) -> Path:
        """Create ``pkg/mod/<name>@<version>/go.mod``."""
        mod_dir = self.root / "pkg" / "mod" / (
            f"{escape_module_path(name)}@{escape_module_path(version)}"
        )
        mod_dir.mkdir(parents=True)
        (mod_dir / "go.mod").write_text(go_mod(name, *requires))
        return mod_dir

    def add_src(self, name: str, *requires: str) -> Path:
        """Create a legacy ``src/<name>/go.mod`` checkout."""
        src_dir = self.root / "src" / escape_module_path(name)
        src_dir.mkdir(parents=True)
        (src_dir / "go.mod").write_text(go_mod(name, *requires))
        return src_dir

    @property
    def locator(self) -> CacheLocator:
        return CacheLocator(self.root)


@pytest.fixture
def gopath(tmp_path: Path) -> FakeGopath:
    return FakeGopath(tmp_path / "gopath")


@pytest.fixture
def make_project(tmp_path: Path):
    """Factory: write a project go.mod and return its directory."""

    def _make(module: str, *requires: str, name: str = "project") -> Path:
        project = tmp_path / name
        project.mkdir(parents=True)
        (project / "go.mod").write_text(go_mod(module, *requires))
        return project

    return _make
