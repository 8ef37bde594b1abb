"""
Token model for the graphy expression language.

Every token kind is a member of the closed ``TokenKind`` enum. Precedence and
associativity live entirely in the token data (``lbp``, ``right_assoc``,
``prefix``); the parser reads them and never hard-codes an operator ladder.
Adding an operator means an ``OperatorSpec`` here, an IR operator member and
an evaluator entry; the parser needs no change.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum, auto
from types import MappingProxyType


class TokenKind(StrEnum):
    """Token types for the expression language."""

    OPERATOR = auto()
    VALUE = auto()
    VARIABLE = auto()
    FUNCTION = auto()
    LPAREN = auto()
    RPAREN = auto()
    EOF = auto()


# Binding power used to parse the operand of a unary operator and the
# argument of a function, so ``sin 4+5`` is ``sin(4) + 5`` and ``-2^2`` is
# ``-(2^2)``.
PREFIX_BP = 70

# ``(`` has the highest binding power; its nud parses at 0 up to ``)``.
PAREN_BP = 80


@dataclass(frozen=True, slots=True)
class OperatorSpec:
    """Parsing data for one operator symbol."""

    symbol: str
    lbp: int
    right_assoc: bool = False
    prefix: bool = False

    @property
    def rbp(self) -> int:
        """Binding power for the right operand of the infix form."""
        return self.lbp - 1 if self.right_assoc else self.lbp


OPERATORS: Mapping[str, OperatorSpec] = MappingProxyType(
    {
        "+": OperatorSpec("+", 50, prefix=True),
        "-": OperatorSpec("-", 50, prefix=True),
        "*": OperatorSpec("*", 60),
        "/": OperatorSpec("/", 60),
        # Higher than PREFIX_BP so that -2^2 == -4
        "^": OperatorSpec("^", 75, right_assoc=True),
    }
)


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the expression tokenizer.

    Only the payload field matching ``kind`` is set: ``number`` for VALUE,
    ``name`` for VARIABLE and FUNCTION, ``operator`` for OPERATOR.
    """

    kind: TokenKind
    text: str
    pos: int
    lbp: int = 0
    number: float | None = None
    name: str | None = None
    operator: OperatorSpec | None = None

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, pos={self.pos})"

    @classmethod
    def for_operator(cls, spec: OperatorSpec, pos: int) -> Token:
        return cls(TokenKind.OPERATOR, spec.symbol, pos, lbp=spec.lbp, operator=spec)

    @classmethod
    def for_value(cls, text: str, number: float, pos: int) -> Token:
        return cls(TokenKind.VALUE, text, pos, number=number)

    @classmethod
    def for_variable(cls, name: str, pos: int) -> Token:
        return cls(TokenKind.VARIABLE, name, pos, name=name)

    @classmethod
    def for_function(cls, name: str, pos: int) -> Token:
        return cls(TokenKind.FUNCTION, name, pos, name=name)

    @classmethod
    def lparen(cls, pos: int) -> Token:
        return cls(TokenKind.LPAREN, "(", pos, lbp=PAREN_BP)

    @classmethod
    def rparen(cls, pos: int) -> Token:
        return cls(TokenKind.RPAREN, ")", pos)

    @classmethod
    def eof(cls, pos: int) -> Token:
        return cls(TokenKind.EOF, "", pos)
