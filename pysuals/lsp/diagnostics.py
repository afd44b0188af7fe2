"""Line-based checks for common mistakes."""

from __future__ import annotations

from dataclasses import dataclass

from pysuals.lsp.types import Position, Range

ERROR = 1
WARNING = 2


@dataclass
class Diagnostic:
    """A problem reported for a range of a document."""

    range: Range
    severity: int | None
    code: str | None
    source: str | None
    message: str


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts]


def _make(line: int, width: int, severity: int, message: str) -> Diagnostic:
    return Diagnostic(
        range=Range(Position(line, 0), Position(line, width)),
        severity=severity,
        code=None,
        source="PySuals",
        message=message,
    )


class DiagnosticProvider:
    """Flags misspelt keywords and functions lacking return type hints."""

    def get_diagnostics(self, uri: str, content: str) -> list[Diagnostic]:
        """Return the diagnostics for ``content``, in line order."""
        diagnostics = []
        for number, line in enumerate(_lines(content)):
            if "@compnent" in line:
                diagnostics.append(_make(number, 10, ERROR, "Did you mean @component?"))
            if "siganl" in line:
                diagnostics.append(_make(number, 6, ERROR, "Did you mean signal?"))
            if line.strip().startswith("def") and "->" not in line:
                diagnostics.append(_make(number, 3, WARNING, "Missing return type hint"))
        return diagnostics