"""Serialises a stylesheet into compact CSS."""

from __future__ import annotations

from pysuals.css.model import CssDeclaration, Stylesheet


class CssMinifier:
    """Produces minified CSS text from a :class:`Stylesheet`."""

    def minify(self, stylesheet: Stylesheet) -> str:
        """Render every rule without superfluous whitespace."""
        return "".join(
            self._minify_selector(rule.selector)
            + "{"
            + "".join(self._minify_declaration(d) for d in rule.declarations)
            + "}"
            for rule in stylesheet.rules
        )

    def _minify_selector(self, selector: str) -> str:
        compact = (
            selector.replace(" :", ":")
            .replace(" > ", ">")
            .replace(" + ", "+")
            .replace(" ~ ", "~")
        )
        return ",".join(part.strip() for part in compact.split(","))

    def _minify_declaration(self, decl: CssDeclaration) -> str:
        prop = decl.property.strip()
        value = self._minify_value(decl.value)
        suffix = "!important" if decl.important else ""
        return f"{prop}:{value}{suffix};"

    def _minify_value(self, value: str) -> str:
        result = (
            value.replace("  ", " ")
            .replace(" 0px", " 0")
            .replace("0px ", "0 ")
            .replace("0px", "0")
            .replace(" 0%", " 0")
            .replace("0% ", "0 ")
        )
        if result.startswith("rgba(") and result.endswith(")"):
            result = self._minify_rgba(result)
        return result

    def _minify_rgba(self, rgba: str) -> str:
        parts = [p.strip() for p in rgba[5:-1].split(",")]
        if len(parts) == 4 and parts[3] == "1":
            r, g, b, _ = parts
            return f"rgb({r},{g},{b})"
        return rgba

    def remove_comments(self, css: str) -> str:
        """Drop ``/* ... */`` comments; an unclosed comment runs to the end."""
        pieces = []
        pos = 0
        while True:
            start = css.find("/*", pos)
            if start == -1:
                pieces.append(css[pos:])
                break
            pieces.append(css[pos:start])
            end = css.find("*/", start + 2)
            if end == -1:
                break
            pos = end + 2
        return "".join(pieces)