import pytest

from pysuals.css.minify import CssMinifier
from pysuals.css.model import CssDeclaration, CssRule, Stylesheet


@pytest.fixture
def minifier():
    return CssMinifier()


def _sheet(selector, *decls):
    return Stylesheet([CssRule(selector, list(decls))], [])


def test_minify_simple(minifier):
    assert minifier.minify(_sheet("a", CssDeclaration("color", "red"))) == "a{color:red;}"


def test_minify_empty(minifier):
    assert minifier.minify(Stylesheet()) == ""


def test_minify_important(minifier):
    out = minifier.minify(_sheet("a", CssDeclaration("color", "red", True)))
    assert out.endswith("!important;}")


def test_minify_rule_count_matches_braces(minifier):
    sheet = Stylesheet(
        [
            CssRule("a", [CssDeclaration("color", "red")]),
            CssRule("b", [CssDeclaration("width", "1px")]),
        ]
    )
    out = minifier.minify(sheet)
    assert out.count("{") == 2
    assert out.count("}") == 2
    assert out.index("a{") < out.index("b{")


def test_minify_selector_combinators(minifier):
    out = minifier.minify(_sheet("ul > li , p + span", CssDeclaration("color", "red")))
    assert out.startswith("ul>li,p+span{")


def test_minify_zero_px(minifier):
    out = minifier.minify(_sheet("a", CssDeclaration("margin", "0px 0px")))
    assert "px" not in out


def test_minify_rgba_opaque(minifier):
    out = minifier.minify(_sheet("a", CssDeclaration("color", "rgba(1, 2, 3, 1)")))
    assert "rgb(1,2,3)" in out
    assert "rgba" not in out


def test_minify_rgba_translucent_kept(minifier):
    out = minifier.minify(_sheet("a", CssDeclaration("color", "rgba(1, 2, 3, 0.5)")))
    assert "rgba(1, 2, 3, 0.5)" in out


def test_remove_comments(minifier):
    assert minifier.remove_comments("a/* note */b") == "ab"


def test_remove_comments_unclosed(minifier):
    assert minifier.remove_comments("a{}/* open") == "a{}"


def test_remove_comments_without_comments_is_identity(minifier):
    text = "a { color: red; }"
    assert minifier.remove_comments(text) == text


def test_remove_comments_leaves_no_markers(minifier):
    out = minifier.remove_comments("/*x*/a/*y*/{/**/}")
    assert "/*" not in out and "*/" not in out