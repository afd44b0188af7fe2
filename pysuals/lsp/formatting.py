"""Whole-document re-indentation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pysuals.lsp.types import Position, Range, TextEdit

_INDENT = "    "
_LAST_LINE = 10000


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


class Formatter:
    """Re-indents documents by four spaces per open block."""

    def format(self, params: Any) -> list[TextEdit] | None:
        """Return one edit replacing the document, or None for bad params."""
        if not isinstance(params, dict):
            return None
        text_doc = params.get("textDocument")
        if not isinstance(text_doc, dict):
            return None
        uri = text_doc.get("uri")
        if not isinstance(uri, str):
            return None
        formatted = self.format_content(self._get_content(uri))
        return [
            TextEdit(
                range=Range(Position(0, 0), Position(_LAST_LINE, 0)),
                new_text=formatted,
            )
        ]

    def _get_content(self, uri: str) -> str:
        if uri.startswith("file://"):
            try:
                return Path(uri[len("file://"):]).read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                pass
        return ""

    def format_content(self, content: str) -> str:
        """Re-indent ``content``: a line ending in ':' opens a block, '}' or ')' closes one."""
        out = []
        indent = 0
        for line in _lines(content):
            trimmed = line.strip()
            if trimmed.endswith(":"):
                out.append(_INDENT * indent + trimmed + "\n")
                indent += 1
            else:
                if trimmed.startswith(("}", ")")) and indent > 0:
                    indent -= 1
                out.append(_INDENT * indent + trimmed + "\n")
        return "".join(out)