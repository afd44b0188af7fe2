"""Indexing of workspace source files for symbol and reference lookups."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from pysuals.lsp.types import Location, Position, Range

_SKIPPED_DIRS = {"node_modules", ".git", "dist"}
_SOURCE_SUFFIXES = {".pys", ".pydom"}
COMPONENT_KIND = 2
MATCH_KIND = 5


@dataclass
class SymbolInfo:
    """A named symbol and where it was found."""

    name: str
    kind: int
    location: Location


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def _line_location(uri: str, line: int, width: int) -> Location:
    return Location(uri, Range(Position(line, 0), Position(line, width)))


class WorkspaceManager:
    """Holds the contents of every source file under the workspace root."""

    def __init__(self) -> None:
        self.root_path: Path | None = None
        self.files: dict[str, str] = {}

    def initialize(self, root_uri: str) -> None:
        """Set the root from a ``file://`` URI and index its source files."""
        if root_uri.startswith("file://"):
            self.root_path = Path(root_uri[len("file://"):])
            self._scan_directory(self.root_path)

    def _scan_directory(self, directory: Path) -> None:
        try:
            entries = list(os.scandir(directory))
        except OSError:
            return
        for entry in entries:
            path = Path(entry.path)
            if path.is_dir():
                if path.name not in _SKIPPED_DIRS:
                    self._scan_directory(path)
            elif path.suffix in _SOURCE_SUFFIXES:
                try:
                    content = path.read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError):
                    continue
                self.files[f"file://{path}"] = content

    def get_file(self, uri: str) -> str | None:
        """Return the indexed content of ``uri``."""
        return self.files.get(uri)

    def get_all_files(self) -> list[tuple[str, str]]:
        """Return every ``(uri, content)`` pair."""
        return list(self.files.items())

    def search_symbols(self, query: str) -> list[SymbolInfo]:
        """Return component declarations and every line containing ``query``."""
        symbols = []
        for uri, content in self.files.items():
            for number, line in enumerate(_lines(content)):
                if "@component" in line:
                    words = line.split()
                    if len(words) > 1:
                        name = words[1]
                        symbols.append(
                            SymbolInfo(name, COMPONENT_KIND, _line_location(uri, number, len(name)))
                        )
                if query in line:
                    symbols.append(
                        SymbolInfo(query, MATCH_KIND, _line_location(uri, number, len(query)))
                    )
        return symbols

    def get_references(self, uri: str, line: int, character: int) -> list[Location]:
        """Return every line in the workspace containing the word at the position."""
        word = self._word_at(uri, line, character)
        if word is None:
            return []
        return [
            _line_location(file_uri, number, len(word))
            for file_uri, content in self.files.items()
            for number, text in enumerate(_lines(content))
            if word in text
        ]

    def _word_at(self, uri: str, line: int, character: int) -> str | None:
        content = self.files.get(uri)
        if content is None:
            return None
        lines = _lines(content)
        if not 0 <= line < len(lines):
            return None
        text = lines[line]
        if not (0 <= character < len(text) and text[character].isalpha()):
            return None
        start = character
        while start > 0 and text[start - 1].isalpha():
            start -= 1
        end = character
        while end < len(text) and text[end].isalpha():
            end += 1
        return text[start:end]