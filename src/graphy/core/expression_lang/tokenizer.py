"""
Tokenizer for the graphy expression language.

Converts an expression string into a sequence of typed tokens, resolving
identifiers against the static symbol tables as it goes.
"""

from __future__ import annotations

import re

from graphy.core.errors import ErrorContext, ErrorKind, LexicalError
from graphy.core.expression_lang.symbols import CONSTANTS, FUNCTIONS, VARIABLES
from graphy.core.expression_lang.tokens import OPERATORS, Token

# Floats must be tried before ints, otherwise "1.5" scans as "1" and a stray "."
_FLOAT_RE = re.compile(r"[0-9]+\.[0-9]*|\.[0-9]+")
_INT_RE = re.compile(r"[0-9]+")
# Identifier: letter or underscore followed by alphanumerics/underscores
_IDENT_RE = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")

_WHITESPACE = " \t\r\n"


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens.

    The returned list always ends with a single EOF token.

    Raises:
        LexicalError: On an unknown identifier or an unrecognised character.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c in _WHITESPACE:
            i += 1
            continue

        # Single-character operators and parentheses
        spec = OPERATORS.get(c)
        if spec is not None:
            tokens.append(Token.for_operator(spec, i))
            i += 1
            continue
        if c == "(":
            tokens.append(Token.lparen(i))
            i += 1
            continue
        if c == ")":
            tokens.append(Token.rparen(i))
            i += 1
            continue

        # Numbers
        m = _FLOAT_RE.match(source, i) or _INT_RE.match(source, i)
        if m is not None:
            text = m.group(0)
            tokens.append(Token.for_value(text, float(text), i))
            i = m.end()
            continue

        # Identifiers: variables, then functions, then constants
        m = _IDENT_RE.match(source, i)
        if m is not None:
            tokens.append(_classify_identifier(source, m.group(0), i))
            i = m.end()
            continue

        raise LexicalError(
            f"Failed in processing input: {source[i:]!r}",
            ErrorKind.UNRECOGNIZED_INPUT,
            fragment=source[i:],
            context=ErrorContext(source, i),
        )

    tokens.append(Token.eof(n))
    return tokens


def _classify_identifier(source: str, word: str, pos: int) -> Token:
    """Resolve an identifier to a variable, function or constant token."""
    if word in VARIABLES:
        return Token.for_variable(word, pos)
    if word in FUNCTIONS:
        return Token.for_function(word, pos)
    if word in CONSTANTS:
        return Token.for_value(word, CONSTANTS[word], pos)
    raise LexicalError(
        f"Unknown symbol {word!r}",
        ErrorKind.UNKNOWN_SYMBOL,
        fragment=word,
        context=ErrorContext(source, pos),
    )
