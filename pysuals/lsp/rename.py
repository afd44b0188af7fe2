"""Rename requests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from pysuals.lsp.types import TextEdit


@dataclass
class VersionedTextDocumentIdentifier:
    """A document and the version an edit applies to."""

    uri: str
    version: int


@dataclass
class TextDocumentEdit:
    """Edits to one versioned document."""

    json_variant: ClassVar[str] = "TextDocumentEdit"

    text_document: VersionedTextDocumentIdentifier
    edits: list[TextEdit]


@dataclass
class WorkspaceEdit:
    """Changes across the workspace, by URI or per document."""

    changes: dict[str, list[TextEdit]] | None = None
    document_changes: list[TextDocumentEdit] | None = None


class RenameProvider:
    """Answers rename requests."""

    def rename_symbol(self, params: Any) -> WorkspaceEdit:
        """Return the workspace edit for a rename; no occurrences are changed."""
        return WorkspaceEdit(changes={}, document_changes=None)