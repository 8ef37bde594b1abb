"""
Error types for graphy expression parsing and evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorKind(StrEnum):
    """Machine-readable classification carried by every graphy error."""

    # Lexical
    UNKNOWN_SYMBOL = "unknown_symbol"
    UNRECOGNIZED_INPUT = "unrecognized_input"
    # Syntax
    UNMATCHED_PAREN = "unmatched_paren"
    UNEXPECTED_TOKEN = "unexpected_token"
    INCOMPLETE_EXPRESSION = "incomplete_expression"
    # Evaluation
    MALFORMED_TREE = "malformed_tree"


@dataclass(frozen=True)
class ErrorContext:
    """
    Location of an error inside the expression source.

    Attributes:
        source: The full expression string that was being processed
        pos: 0-based character offset of the error
    """

    source: str
    pos: int

    @property
    def line(self) -> int:
        """1-based line number of ``pos``."""
        return self.source.count("\n", 0, self.pos) + 1

    @property
    def column(self) -> int:
        """1-based column number of ``pos``."""
        return self.pos - (self.source.rfind("\n", 0, self.pos) + 1) + 1

    def format(self) -> str:
        """
        Format the offending source line with a caret under the error.

        Returns:
            Formatted string like:
                1:5
                  2 + * 3
                      ^
        """
        lines = self.source.split("\n")
        text = lines[self.line - 1] if lines else ""
        marker = " " * (self.column - 1) + "^"
        return f"{self.line}:{self.column}\n  {text}\n  {marker}"


class GraphyError(Exception):
    """Base exception for all graphy errors."""

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind, context: ErrorContext | None = None):
        self.message = message
        self.kind = kind
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message

    @property
    def pos(self) -> int | None:
        return self.context.pos if self.context else None


class ParseError(GraphyError):
    """
    Raised when an expression string cannot be turned into a tree.

    Callers that only care whether parsing succeeded catch this; the
    subclasses distinguish scanning failures from grammar failures.
    """

    pass


class LexicalError(ParseError):
    """
    Raised when the tokenizer cannot classify part of the input.

    Examples:
    - Unknown identifier (``foo2``)
    - Unrecognised character (``2 $ 3``)

    ``fragment`` holds the offending identifier or the unconsumed remainder.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        fragment: str,
        context: ErrorContext | None = None,
    ):
        self.fragment = fragment
        super().__init__(message, kind, context)


class ExpressionSyntaxError(ParseError):
    """
    Raised when the token stream does not form a complete expression.

    Examples:
    - Unmatched parenthesis
    - Operator in prefix position without prefix support (``*3``)
    - Missing operand (``2 +``) or empty input
    - Leftover tokens after a complete expression (``2 + 3)``)

    ``token`` holds the text of the offending token, empty at end of input.
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        token: str = "",
        context: ErrorContext | None = None,
    ):
        self.token = token
        super().__init__(message, kind, context)


class EvaluationError(GraphyError):
    """
    Raised when the evaluator meets a node it cannot evaluate.

    Never raised for a tree returned by a successful parse.
    """

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.MALFORMED_TREE)
