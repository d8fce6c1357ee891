"""Parser for Go go.mod files."""

from __future__ import annotations

import re
from pathlib import Path

from modgraph.exceptions import ManifestParseError
from modgraph.manifest.models import ModFile, Requirement
from modgraph.manifest.registry import register_parser

# Quoted ("..." or `...`) or bare tokens
_TOKEN_RE = re.compile(r'"(?:[^"\\]|\\.)*"|`[^`]*`|\S+')

# Directives we understand; only module, go and require carry data we keep.
_VERBS = frozenset(
    {
        "module",
        "go",
        "toolchain",
        "godebug",
        "require",
        "exclude",
        "replace",
        "retract",
        "tool",
        "ignore",
    }
)


def _split_comment(line: str) -> tuple[str, str]:
    """Split a line into (code, comment), ignoring ``//`` inside quotes."""
    in_quote: str | None = None
    i = 0
    while i < len(line):
        ch = line[i]
        if in_quote:
            if ch == "\\" and in_quote == '"':
                i += 2
                continue
            if ch == in_quote:
                in_quote = None
        elif ch in ('"', "`"):
            in_quote = ch
        elif line.startswith("//", i):
            return line[:i], line[i + 2 :].strip()
        i += 1
    return line, ""


def _unquote(token: str) -> str:
    if len(token) >= 2 and token[0] == token[-1] and token[0] in ('"', "`"):
        body = token[1:-1]
        if token[0] == '"':
            body = re.sub(r"\\(.)", r"\1", body)
        return body
    return token


def _is_indirect(comment: str) -> bool:
    return comment == "indirect" or comment.startswith("indirect;")


class GoModParser:
    file_name = "go.mod"

    def parse(self, file_path: Path, content: str) -> ModFile:
        path = str(file_path)
        module: str | None = None
        go_version: str | None = None
        requires: list[Requirement] = []

        block: str | None = None
        block_start = 0

        def fail(message: str, lineno: int) -> ManifestParseError:
            return ManifestParseError(message, path, lineno)

        def require(args: list[str], comment: str, lineno: int) -> None:
            if len(args) != 2:
                raise fail("usage: require module/path v1.2.3", lineno)
            requires.append(
                Requirement(
                    path=_unquote(args[0]),
                    version=_unquote(args[1]),
                    indirect=_is_indirect(comment),
                )
            )

        for lineno, raw_line in enumerate(content.splitlines(), start=1):
            code, comment = _split_comment(raw_line)
            tokens = _TOKEN_RE.findall(code)
            if not tokens:
                continue

            if block is not None:
                if tokens == [")"]:
                    block = None
                    continue
                if block == "require":
                    require(tokens, comment, lineno)
                continue

            verb, args = tokens[0], tokens[1:]
            if verb not in _VERBS:
                raise fail(f"unknown directive: {verb}", lineno)

            if args == ["("]:
                block, block_start = verb, lineno
                continue
            if args == ["()"] or args == ["(", ")"]:
                continue

            if verb == "module":
                if module is not None:
                    raise fail("repeated module statement", lineno)
                if len(args) != 1:
                    raise fail("usage: module module/path", lineno)
                module = _unquote(args[0])
            elif verb == "go":
                if len(args) != 1:
                    raise fail("usage: go 1.23", lineno)
                go_version = args[0]
            elif verb == "require":
                require(args, comment, lineno)

        if block is not None:
            raise fail(f"unterminated {block} block", block_start)
        if not module:
            raise ManifestParseError("no module declaration", path)

        return ModFile(module=module, go_version=go_version, requires=requires)


register_parser(GoModParser())
