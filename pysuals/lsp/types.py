"""Protocol data shared by the language-server features."""

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
from typing import Any


@dataclass
class Position:
    """A zero-based line and character offset in a document."""

    line: int
    character: int


@dataclass
class Range:
    """A span between two positions."""

    start: Position
    end: Position


@dataclass
class Location:
    """A range inside the document at ``uri``."""

    uri: str
    range: Range


@dataclass
class TextEdit:
    """Replacement of a range of text with ``new_text``."""

    range: Range
    new_text: str


def to_json(value: Any) -> Any:
    """Convert protocol objects into plain JSON-compatible values.

    Dataclasses become dicts keyed by field name; a class that sets a
    ``json_variant`` attribute is wrapped in a one-key dict under that name.
    """
    if is_dataclass(value) and not isinstance(value, type):
        data = {f.name: to_json(getattr(value, f.name)) for f in fields(value)}
        variant = getattr(value, "json_variant", None)
        return {variant: data} if variant else data
    if isinstance(value, dict):
        return {str(key): to_json(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(item) for item in value]
    return value