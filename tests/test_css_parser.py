import pytest

from pysuals.css.model import CssDeclaration
from pysuals.css.parser import CssParser


@pytest.fixture
def parser():
    return CssParser()


def test_parse_simple_rule(parser):
    sheet = parser.parse("a { color: red; }")
    assert len(sheet.rules) == 1
    rule = sheet.rules[0]
    assert rule.selector == "a"
    assert rule.declarations == [CssDeclaration("color", "red", False)]


def test_parse_important(parser):
    sheet = parser.parse("p { margin: 0 !important; }")
    decl = sheet.rules[0].declarations[0]
    assert decl.property == "margin"
    assert decl.value == "0"
    assert decl.important is True


def test_parse_multiple_rules_keeps_order(parser):
    sheet = parser.parse("a { color: red; } div { width: 10px; height: 5px }")
    assert [r.selector for r in sheet.rules] == ["a", "div"]
    assert [d.property for d in sheet.rules[1].declarations] == ["width", "height"]
    assert [d.value for d in sheet.rules[1].declarations] == ["10px", "5px"]


def test_parse_import(parser):
    sheet = parser.parse('@import "theme.css" { x: y; }')
    assert sheet.imports == ["theme.css"]
    assert sheet.rules == []


def test_rule_without_declarations_dropped(parser):
    sheet = parser.parse("a { ; }")
    assert sheet.rules == []
    assert sheet.imports == []


def test_parse_empty(parser):
    assert parser.parse("").rules == []


def test_parse_selector(parser):
    assert parser.parse_selector("a, b ,c") == ["a", "b", "c"]


def test_parse_declaration(parser):
    assert parser.parse_declaration(" color : red ") == CssDeclaration("color", "red", False)


@pytest.mark.parametrize("text", ["nocolon", "a:b:c"])
def test_parse_declaration_rejects(parser, text):
    assert parser.parse_declaration(text) is None