import pytest

from pysuals.lang.indentation import (
    IndentationCheckError,
    IndentationChecker,
    check_indentation,
)


def errors_for(source):
    with pytest.raises(IndentationCheckError) as info:
        check_indentation(source)
    return info.value.errors


def test_valid_source_passes():
    checker = IndentationChecker()
    assert checker.check("def f():\n    return 1\n") is None
    assert checker.errors == []


def test_not_multiple_of_four():
    errors = errors_for("a\n  b")
    assert errors[0] == "Line 2: Indentation must be multiple of 4 spaces, found 2 spaces"
    assert any("Unexpected indentation level" in e for e in errors)


def test_indent_jump_too_large():
    errors = errors_for("a\n        b")
    assert len(errors) == 1
    assert "Unexpected indentation level" in errors[0]


def test_dedent_to_any_level_allowed():
    checker = IndentationChecker()
    checker.check("a\n    b\n        c\nd\n    e")
    assert checker.indent_level == 1


def test_blank_and_crlf_lines():
    checker = IndentationChecker()
    checker.check("a\r\n\r\n    b\r\n")
    assert checker.errors == []
    assert checker.indent_level == 1


def test_tabs_are_not_counted_as_indent():
    checker = IndentationChecker()
    checker.check("\tb")
    assert checker.indent_level == 0


def test_invalid_dedent():
    errors = errors_for("a\n    b\n        c\n  d")
    assert any("Invalid dedent" in e for e in errors)
    assert all(e.startswith("Line ") for e in errors)


def test_error_message_joins_all_errors():
    with pytest.raises(IndentationCheckError) as info:
        check_indentation("a\n  b")
    assert str(info.value) == "; ".join(info.value.errors)
    assert isinstance(info.value, ValueError)


def test_errors_accumulate_on_reused_checker():
    checker = IndentationChecker()
    with pytest.raises(IndentationCheckError):
        checker.check("a\n  b")
    first = list(checker.errors)
    with pytest.raises(IndentationCheckError) as info:
        checker.check("a")
    assert info.value.errors == first