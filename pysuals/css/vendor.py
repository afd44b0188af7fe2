"""Adds vendor-prefixed variants of declarations."""

from __future__ import annotations

from dataclasses import replace

from pysuals.css.model import CssDeclaration, Stylesheet

_PREFIXED_PROPERTIES: dict[str, tuple[str, ...]] = {
    "user-select": ("-webkit-user-select",),
    "transform": ("-webkit-transform",),
    "transition": ("-webkit-transition",),
    "animation": ("-webkit-animation",),
    "appearance": ("-webkit-appearance", "-moz-appearance"),
}


class VendorPrefixer:
    """Inserts vendor-prefixed declarations ahead of the standard ones."""

    def process(self, stylesheet: Stylesheet) -> Stylesheet:
        """Return ``stylesheet`` with prefixed declarations added."""
        rules = [
            replace(
                rule,
                declarations=[
                    out
                    for decl in rule.declarations
                    for out in self._prefix_declaration(decl)
                ],
            )
            for rule in stylesheet.rules
        ]
        return replace(stylesheet, rules=rules)

    def _prefix_declaration(self, decl: CssDeclaration) -> list[CssDeclaration]:
        if decl.property == "display" and decl.value == "flex":
            return [CssDeclaration("display", "-webkit-flex", decl.important), replace(decl)]
        prefixes = _PREFIXED_PROPERTIES.get(decl.property, ())
        return [
            *(CssDeclaration(p, decl.value, decl.important) for p in prefixes),
            replace(decl),
        ]

    def prefix_keyframes(self, name: str) -> list[str]:
        """Return the prefixed and standard keyframes headers."""
        return [f"@-webkit-keyframes {name}", f"@keyframes {name}"]

    def needs_prefix(self, property: str) -> bool:
        """Whether ``property`` gets vendor-prefixed variants."""
        return property in _PREFIXED_PROPERTIES