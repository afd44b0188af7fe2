"""A small regex-based CSS parser."""

from __future__ import annotations

import re

from pysuals.css.model import CssDeclaration, CssRule, Stylesheet

_RULE_RE = re.compile(r"([^{]+)\{([^}]+)\}")
_IMPORT_RE = re.compile(r"""@import\s+["']([^"']+)["']""")
_DECL_RE = re.compile(r"([^:;]+):([^;]+);?")
_IMPORTANT = "!important"


def _strip_important(value: str) -> str:
    while value.endswith(_IMPORTANT):
        value = value[: -len(_IMPORTANT)]
    return value.strip()


class CssParser:
    """Parses CSS text into a :class:`Stylesheet`."""

    def parse(self, css: str) -> Stylesheet:
        """Parse ``css``; rules without declarations are dropped."""
        stylesheet = Stylesheet()
        for match in _RULE_RE.finditer(css):
            selector = match.group(1).strip()
            body = match.group(2)

            if selector.startswith("@import"):
                import_match = _IMPORT_RE.search(selector)
                if import_match:
                    stylesheet.imports.append(import_match.group(1))
                continue

            declarations = []
            for decl in _DECL_RE.finditer(body):
                value = decl.group(2).strip()
                important = value.endswith(_IMPORTANT)
                if important:
                    value = _strip_important(value)
                declarations.append(
                    CssDeclaration(decl.group(1).strip(), value, important)
                )

            if declarations:
                stylesheet.rules.append(CssRule(selector, declarations))
        return stylesheet

    def parse_selector(self, selector: str) -> list[str]:
        """Split a selector list on commas."""
        return [part.strip() for part in selector.split(",")]

    def parse_declaration(self, decl: str) -> CssDeclaration | None:
        """Parse ``property: value``; return None unless exactly one colon."""
        parts = decl.split(":")
        if len(parts) != 2:
            return None
        prop, value = parts
        return CssDeclaration(prop.strip(), value.strip(), False)