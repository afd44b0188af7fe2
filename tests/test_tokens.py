import pytest

from pysuals.lang.tokens import Lexer, Token, TokenStream, TokenType, tokenize


def types(source):
    return [t.token_type for t in tokenize(source)]


@pytest.mark.parametrize(
    "word, expected",
    [
        ("component", TokenType.COMPONENT),
        ("signal", TokenType.SIGNAL),
        ("def", TokenType.DEF),
        ("return", TokenType.RETURN),
        ("export", TokenType.EXPORT),
        ("default", TokenType.DEFAULT),
        ("css", TokenType.CSS),
        ("true", TokenType.TRUE),
        ("false", TokenType.FALSE),
        ("null", TokenType.NULL),
        ("counter", TokenType.IDENT),
    ],
)
def test_keywords_and_identifiers(word, expected):
    tokens = tokenize(word)
    assert tokens[0].token_type is expected
    assert tokens[0].value == word


@pytest.mark.parametrize(
    "text, expected",
    [
        ("==", TokenType.EQ_EQ),
        ("=>", TokenType.ARROW),
        ("!=", TokenType.NOT_EQ),
        ("<=", TokenType.LT_EQ),
        (">=", TokenType.GT_EQ),
        ("&&", TokenType.AND),
        ("||", TokenType.OR),
        ("=", TokenType.EQ),
        ("!", TokenType.NOT),
        ("<", TokenType.LT),
        (">", TokenType.GT),
        ("%", TokenType.PERCENT),
    ],
)
def test_operators(text, expected):
    tokens = tokenize(text)
    assert [t.token_type for t in tokens] == [expected, TokenType.EOF]
    assert tokens[0].value == text


def test_ends_with_empty_eof():
    tokens = tokenize("a b")
    assert tokens[-1].token_type is TokenType.EOF
    assert tokens[-1].value == ""
    assert sum(t.token_type is TokenType.EOF for t in tokens) == 1


def test_columns_point_at_token_text():
    source = "component App(x: int) == y => 'hi' 3.5"
    for token in tokenize(source)[:-1]:
        if token.token_type is TokenType.STRING:
            continue
        start = token.column - 1
        assert source[start : start + len(token.value)] == token.value


def test_string_escapes():
    tokens = tokenize('"a\\nb\\t\\"c"')
    assert tokens[0].token_type is TokenType.STRING
    assert tokens[0].value == 'a\nb\t"c'


def test_single_quoted_string():
    tokens = tokenize("'hello world'")
    assert tokens[0].value == "hello world"
    assert tokens[1].token_type is TokenType.EOF


def test_number_keeps_text():
    tokens = tokenize("3.14")
    assert tokens[0].token_type is TokenType.NUMBER
    assert tokens[0].value == "3.14"


def test_identifier_with_underscore_and_digits():
    tokens = tokenize("_foo1 bar")
    assert [t.value for t in tokens[:2]] == ["_foo1", "bar"]


def test_comments_and_newlines_skipped():
    tokens = tokenize("# hello\nfoo")
    assert [t.token_type for t in tokens] == [TokenType.IDENT, TokenType.EOF]
    assert tokens[0].line == 2
    assert tokens[0].column == 1


def test_unexpected_character_stops_lexing():
    lexer = Lexer("a $ b")
    tokens = lexer.tokenize()
    assert [t.token_type for t in tokens] == [TokenType.IDENT]
    assert "Unexpected character: $" in lexer.errors[0]


def test_lone_ampersand_is_invalid():
    lexer = Lexer("x & y")
    assert [t.value for t in lexer.tokenize()] == ["x"]
    assert "Invalid token" in lexer.errors[0]


def test_token_stream_peek_and_iteration():
    source = "def f(): return 1"
    stream = TokenStream(source)
    first = stream.peek()
    assert first == next(stream)
    assert [first, *stream] == tokenize(source)
    assert stream.peek() is None


def test_exhausted_stream_raises_stop_iteration():
    stream = TokenStream("")
    assert [t.token_type for t in stream] == [TokenType.EOF]
    with pytest.raises(StopIteration):
        next(stream)


def test_token_type_display_uses_variant_name():
    tokens = tokenize("x == y")
    assert [str(t.token_type) for t in tokens] == ["Ident", "EqEq", "Ident", "Eof"]


def test_token_equality():
    assert tokenize("x")[0] == Token(TokenType.IDENT, "x", 1, 1)