"""Lexical analysis of component source text."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class TokenType(Enum):
    """Every kind of token the lexer produces."""

    COMPONENT = "Component"
    SIGNAL = "Signal"
    EFFECT = "Effect"
    COMPUTED = "Computed"
    DEF = "Def"
    RETURN = "Return"
    IF = "If"
    ELSE = "Else"
    FOR = "For"
    IN = "In"
    WHILE = "While"
    IMPORT = "Import"
    FROM = "From"
    EXPORT = "Export"
    DEFAULT = "Default"
    CSS = "Css"

    IDENT = "Ident"
    STRING = "String"
    NUMBER = "Number"

    LPAREN = "LParen"
    RPAREN = "RParen"
    LBRACE = "LBrace"
    RBRACE = "RBrace"
    LBRACKET = "LBracket"
    RBRACKET = "RBracket"
    COLON = "Colon"
    SEMICOLON = "Semicolon"
    COMMA = "Comma"
    DOT = "Dot"

    EQ = "Eq"
    EQ_EQ = "EqEq"
    NOT_EQ = "NotEq"
    LT = "Lt"
    GT = "Gt"
    LT_EQ = "LtEq"
    GT_EQ = "GtEq"
    PLUS = "Plus"
    MINUS = "Minus"
    STAR = "Star"
    SLASH = "Slash"
    PERCENT = "Percent"
    AND = "And"
    OR = "Or"
    NOT = "Not"

    ARROW = "Arrow"
    SPACE = "Space"
    INDENT = "Indent"
    DEDENT = "Dedent"
    NEWLINE = "Newline"

    TRUE = "True"
    FALSE = "False"
    NULL = "Null"

    EOF = "Eof"

    def __str__(self) -> str:
        return self.value


@dataclass
class Token:
    """A token with its text and the position where it starts."""

    token_type: TokenType
    value: str
    line: int
    column: int


_KEYWORDS: dict[str, TokenType] = {
    "component": TokenType.COMPONENT,
    "signal": TokenType.SIGNAL,
    "effect": TokenType.EFFECT,
    "computed": TokenType.COMPUTED,
    "def": TokenType.DEF,
    "return": TokenType.RETURN,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "for": TokenType.FOR,
    "in": TokenType.IN,
    "while": TokenType.WHILE,
    "import": TokenType.IMPORT,
    "from": TokenType.FROM,
    "export": TokenType.EXPORT,
    "default": TokenType.DEFAULT,
    "css": TokenType.CSS,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "null": TokenType.NULL,
}

_SINGLE: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "%": TokenType.PERCENT,
}

# First character -> (plain token, {second character: (text, token)})
_COMPOUND: dict[str, tuple[TokenType | None, dict[str, tuple[str, TokenType]]]] = {
    "=": (TokenType.EQ, {"=": ("==", TokenType.EQ_EQ), ">": ("=>", TokenType.ARROW)}),
    "!": (TokenType.NOT, {"=": ("!=", TokenType.NOT_EQ)}),
    "<": (TokenType.LT, {"=": ("<=", TokenType.LT_EQ)}),
    ">": (TokenType.GT, {"=": (">=", TokenType.GT_EQ)}),
    "&": (None, {"&": ("&&", TokenType.AND)}),
    "|": (None, {"|": ("||", TokenType.OR)}),
}

_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "'": "'", "\\": "\\"}


def _is_alphanumeric(ch: str) -> bool:
    return ch.isalpha() or ch.isnumeric()


class Lexer:
    """Turns source text into tokens.

    Lexing stops at the first invalid character; the problem is recorded
    in :attr:`errors` and reported on standard error.
    """

    def __init__(self, source: str) -> None:
        self._chars = source
        self._position = 0
        self.line = 1
        self.column = 1
        self.errors: list[str] = []

    def tokenize(self) -> list[Token]:
        """Return the tokens, ending with EOF unless lexing failed."""
        tokens = []
        while (token := self._next_token()) is not None:
            tokens.append(token)
            if token.token_type is TokenType.EOF:
                break
        return tokens

    def _is_eof(self) -> bool:
        return self._position >= len(self._chars)

    def _current(self) -> str:
        return "\0" if self._is_eof() else self._chars[self._position]

    def _advance(self) -> None:
        if not self._is_eof():
            self._position += 1
            self.column += 1

    def _error(self, message: str) -> None:
        text = f"Lexer error at {self.line}:{self.column}: {message}"
        self.errors.append(text)
        print(text, file=sys.stderr)

    def _skip_whitespace(self) -> None:
        while not self._is_eof():
            ch = self._current()
            if ch in " \t\r":
                self._advance()
            elif ch == "\n":
                self._advance()
                self.line += 1
                self.column = 1
            elif ch == "#":
                while not self._is_eof() and self._current() != "\n":
                    self._advance()
            else:
                break

    def _next_token(self) -> Token | None:
        self._skip_whitespace()
        if self._is_eof():
            return Token(TokenType.EOF, "", self.line, self.column)

        ch = self._current()
        if ch in _SINGLE:
            self._advance()
            return Token(_SINGLE[ch], ch, self.line, self.column - 1)
        if ch in _COMPOUND:
            plain, followers = _COMPOUND[ch]
            self._advance()
            follower = followers.get(self._current())
            if follower is not None:
                self._advance()
                text, token_type = follower
                return Token(token_type, text, self.line, self.column - 2)
            if plain is None:
                self._error("Invalid token")
                return None
            return Token(plain, ch, self.line, self.column - 1)
        if ch in "\"'":
            return self._read_string()
        if ch.isalpha() or ch == "_":
            return self._read_identifier()
        if ch.isnumeric():
            return self._read_number()
        self._error(f"Unexpected character: {ch}")
        return None

    def _read_while(self, predicate) -> str:
        start = self._position
        while not self._is_eof() and predicate(self._current()):
            self._advance()
        return self._chars[start : self._position]

    def _read_identifier(self) -> Token:
        start_col = self.column
        value = self._read_while(lambda c: _is_alphanumeric(c) or c == "_")
        return Token(_KEYWORDS.get(value, TokenType.IDENT), value, self.line, start_col)

    def _read_number(self) -> Token:
        start_col = self.column
        value = self._read_while(lambda c: c.isnumeric() or c == ".")
        return Token(TokenType.NUMBER, value, self.line, start_col)

    def _read_string(self) -> Token:
        quote = self._current()
        start_col = self.column
        self._advance()
        pieces = []
        while not self._is_eof() and self._current() != quote:
            if self._current() == "\\":
                self._advance()
                escaped = self._current()
                pieces.append(_ESCAPES.get(escaped, escaped))
            else:
                pieces.append(self._current())
            self._advance()
        self._advance()
        return Token(TokenType.STRING, "".join(pieces), self.line, start_col)


class TokenStream:
    """An iterator over the tokens of a source text, with one-token lookahead."""

    def __init__(self, source: str) -> None:
        self._tokens = Lexer(source).tokenize()
        self._position = 0

    def peek(self) -> Token | None:
        """Return the next token without consuming it."""
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        return None

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.peek()
        if token is None:
            raise StopIteration
        self._position += 1
        return token


def tokenize(source: str) -> list[Token]:
    """Return the tokens of ``source``."""
    return Lexer(source).tokenize()