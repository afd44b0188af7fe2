"""Completion of keywords and HTML element names."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

KEYWORD_KIND = 15
ELEMENT_KIND = 7

_KEYWORDS = (
    "component",
    "signal",
    "effect",
    "computed",
    "def",
    "return",
    "if",
    "else",
    "for",
    "in",
    "while",
    "import",
    "from",
)

_BUILTINS = (
    "div",
    "span",
    "button",
    "input",
    "form",
    "h1",
    "h2",
    "h3",
    "p",
    "a",
    "img",
    "ul",
    "li",
)


@dataclass
class CompletionItem:
    """One entry offered to the editor."""

    label: str
    kind: int
    detail: str | None = None
    documentation: str | None = None


class CompletionProvider:
    """Offers the language keywords followed by the built-in elements."""

    def __init__(self) -> None:
        self.keywords: list[str] = list(_KEYWORDS)
        self.builtins: list[str] = list(_BUILTINS)

    def get_completions(self, params: Any = None) -> list[CompletionItem]:
        """Return every keyword and element; ``params`` does not narrow them."""
        keywords = [
            CompletionItem(keyword, KEYWORD_KIND, "Keyword") for keyword in self.keywords
        ]
        elements = [
            CompletionItem(
                builtin,
                ELEMENT_KIND,
                "HTML element",
                f"Creates a <{builtin}> element",
            )
            for builtin in self.builtins
        ]
        return keywords + elements

    def resolve_completion(self, item: CompletionItem) -> CompletionItem:
        """Return a copy of ``item`` with the same fields; nothing more is resolved."""
        resolved = replace(item)
        return resolved