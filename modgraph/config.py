"""Environment-driven settings.

Reads from environment variables:
    GOPATH              — module cache root (default: ~/go)
    MODGRAPH_LOG_LEVEL  — log level (default: WARNING)
    MODGRAPH_LOG_FORMAT — console | json (default: console)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _default_gopath() -> Path:
    gopath = os.environ.get("GOPATH", "").strip()
    if gopath:
        # GOPATH may be a list; the module cache lives under the first entry.
        return Path(gopath.split(os.pathsep)[0]).expanduser()
    return Path.home() / "go"


@dataclass(frozen=True)
class Settings:
    gopath: Path
    log_level: str = "WARNING"
    log_format: str = "console"


def load_settings() -> Settings:
    return Settings(
        gopath=_default_gopath(),
        log_level=os.environ.get("MODGRAPH_LOG_LEVEL", "WARNING").upper(),
        log_format=os.environ.get("MODGRAPH_LOG_FORMAT", "console").lower(),
    )
