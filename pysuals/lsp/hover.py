"""Hover information."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pysuals.lsp.types import Position, Range


@dataclass
class HoverContents:
    """Marked-up hover text."""

    kind: str
    value: str


@dataclass
class Hover:
    """Hover text with the range it applies to."""

    contents: HoverContents
    range: Range | None = None


def _uint(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return None


class HoverProvider:
    """Describes the component at a position."""

    def get_hover(self, params: Any) -> Hover | None:
        """Return hover text for the position in ``params``, or None."""
        if not isinstance(params, dict):
            return None
        position = params.get("position")
        if not isinstance(position, dict):
            return None
        line = _uint(position.get("line"))
        character = _uint(position.get("character"))
        if line is None or character is None:
            return None
        return Hover(
            contents=HoverContents(
                "markdown", f"**PySuals Component**\n\nDefined at line {line}"
            ),
            range=Range(Position(line, character), Position(line, character + 1)),
        )