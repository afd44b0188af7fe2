"""Scoping of CSS selectors to a component via a data attribute."""

from __future__ import annotations

from dataclasses import replace

from pysuals.css.model import Stylesheet


class ScopedCss:
    """Rewrites selectors so they only match inside one component."""

    def __init__(self) -> None:
        self._scope_id = 0

    def scope(self, stylesheet: Stylesheet, scope: str) -> Stylesheet:
        """Return ``stylesheet`` with every rule's selector scoped."""
        rules = [
            replace(rule, selector=self._scope_selector(rule.selector, scope))
            for rule in stylesheet.rules
        ]
        return replace(stylesheet, rules=rules)

    def _scope_selector(self, selector: str, scope: str) -> str:
        scoped = []
        for part in selector.split(","):
            trimmed = part.strip()
            if trimmed.startswith((":", "@")):
                scoped.append(trimmed)
            else:
                scoped.append(self.add_data_attribute(trimmed, scope))
        return ", ".join(scoped)

    def generate_scope_id(self) -> str:
        """Return a fresh scope identifier."""
        self._scope_id += 1
        return f"_scope_{self._scope_id}"

    def scope_keyframes(self, name: str, scope: str) -> str:
        """Return the scoped name of a keyframes block."""
        return f"{name}_{scope}"

    def add_data_attribute(self, selector: str, scope: str) -> str:
        """Append the scope's data attribute to ``selector``."""
        return f"{selector}[data-pysuals-{scope}]"