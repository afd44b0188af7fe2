"""Go-to-definition requests."""

from __future__ import annotations

from typing import Any

from pysuals.lsp.types import Location, Position, Range


def _uint(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return None


class GotoProvider:
    """Answers definition requests with the requested line itself."""

    def get_definition(self, params: Any) -> list[Location]:
        """Return the location of the definition, or an empty list for bad params."""
        if not isinstance(params, dict):
            return []
        text_doc = params.get("textDocument")
        position = params.get("position")
        if not isinstance(text_doc, dict) or not isinstance(position, dict):
            return []
        uri = text_doc.get("uri")
        line = _uint(position.get("line"))
        if not isinstance(uri, str) or line is None:
            return []
        return [Location(uri, Range(Position(line, 0), Position(line, 10)))]