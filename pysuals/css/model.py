"""Data model for parsed stylesheets."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CssDeclaration:
    """A single ``property: value`` pair, optionally marked ``!important``."""

    property: str
    value: str
    important: bool = False


@dataclass
class CssRule:
    """A selector with the declarations that apply to it."""

    selector: str
    declarations: list[CssDeclaration] = field(default_factory=list)


@dataclass
class Stylesheet:
    """A parsed stylesheet: its rules and the paths it imports."""

    rules: list[CssRule] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)