"""The full CSS pipeline: parse, prefix, scope and minify."""

from __future__ import annotations

from pysuals.css.minify import CssMinifier
from pysuals.css.parser import CssParser
from pysuals.css.scoped import ScopedCss
from pysuals.css.vendor import VendorPrefixer


class CssProcessor:
    """Runs CSS text through the whole processing pipeline."""

    def __init__(self) -> None:
        self.parser = CssParser()
        self.scoper = ScopedCss()
        self.minifier = CssMinifier()
        self.prefixer = VendorPrefixer()

    def process(self, css: str, scope: str | None = None) -> str:
        """Return minified CSS, scoped to ``scope`` when one is given."""
        stylesheet = self.prefixer.process(self.parser.parse(css))
        if scope is not None:
            stylesheet = self.scoper.scope(stylesheet, scope)
        return self.minifier.minify(stylesheet)