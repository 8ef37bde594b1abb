"""
Top-down operator precedence (Pratt) parser for the graphy expression language.

There is no grammar ladder. Each token carries a left binding power (lbp), and
the engine asks the token kind how to parse it:

    nud (prefix position)          led (infix position)
    VALUE      → Literal           OPERATOR → BinaryExpr, right side at
    VARIABLE   → VariableRef                  lbp (left assoc) or
    FUNCTION   → FuncCall(arg @ 70)           lbp - 1 (right assoc)
    OPERATOR   → UnaryExpr(@ 70) if prefix-capable
    LPAREN     → inner expr @ 0, then ")"

Effective precedence, high to low: ``^`` (75, right), unary ``+ -`` (70),
``* /`` (60), binary ``+ -`` (50).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from graphy.core.environment import should_trace_parsing
from graphy.core.errors import (
    ErrorContext,
    ErrorKind,
    ExpressionSyntaxError,
    ParseError,
)
from graphy.core.expression_lang.tokenizer import tokenize
from graphy.core.expression_lang.tokens import PREFIX_BP, Token, TokenKind
from graphy.core.ir.expressions import (
    BinaryExpr,
    BinaryOp,
    Expr,
    FuncCall,
    Literal,
    UnaryExpr,
    UnaryOp,
    Variable,
    VariableRef,
)

logger = logging.getLogger(__name__)


class _Parser:
    """Pratt parser over a token list ending in EOF."""

    def __init__(self, tokens: list[Token], source: str) -> None:
        self.tokens = tokens
        self.source = source
        self.pos = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    def error(self, message: str, kind: ErrorKind, tok: Token) -> ExpressionSyntaxError:
        return ExpressionSyntaxError(
            message, kind, token=tok.text, context=ErrorContext(self.source, tok.pos)
        )

    # -- Engine --

    def expression(self, rbp: int) -> Expr:
        """Parse while the next token binds tighter than ``rbp``."""
        if self.current.kind == TokenKind.EOF:
            raise self.error(
                "Incomplete expression: operand expected at end of input",
                ErrorKind.INCOMPLETE_EXPRESSION,
                self.current,
            )
        left = self.nud(self.advance())
        while rbp < self.current.lbp:
            left = self.led(self.advance(), left)
        return left

    def parse(self) -> Expr:
        expr = self.expression(0)
        if self.current.kind != TokenKind.EOF:
            tok = self.current
            if tok.kind == TokenKind.RPAREN:
                raise self.error(
                    "Unmatched right parenthesis", ErrorKind.UNMATCHED_PAREN, tok
                )
            raise self.error(
                f"Unexpected token after expression: {tok.text!r}",
                ErrorKind.UNEXPECTED_TOKEN,
                tok,
            )
        return expr

    # -- Token behaviour --

    def nud(self, tok: Token) -> Expr:
        """Prefix-position behaviour of ``tok``."""
        if tok.kind == TokenKind.VALUE:
            assert tok.number is not None
            return Literal(value=tok.number)

        if tok.kind == TokenKind.VARIABLE:
            return VariableRef(name=Variable(tok.text))

        if tok.kind == TokenKind.FUNCTION:
            # Functions bind like unary operators: sin 4+5 is sin(4)+5
            argument = self.expression(PREFIX_BP)
            return FuncCall(name=tok.text, argument=argument)

        if tok.kind == TokenKind.OPERATOR:
            assert tok.operator is not None
            if not tok.operator.prefix:
                raise self.error(
                    f"Operator {tok.text!r} cannot start an expression",
                    ErrorKind.UNEXPECTED_TOKEN,
                    tok,
                )
            operand = self.expression(PREFIX_BP)
            return UnaryExpr(op=UnaryOp(tok.text), operand=operand)

        if tok.kind == TokenKind.LPAREN:
            inner = self.expression(0)
            if self.current.kind != TokenKind.RPAREN:
                raise self.error(
                    "Unmatched left parenthesis", ErrorKind.UNMATCHED_PAREN, tok
                )
            self.advance()
            # The parenthesis itself is not represented in the tree
            return inner

        if tok.kind == TokenKind.RPAREN:
            raise self.error(
                "Unexpected ')': operand expected", ErrorKind.UNEXPECTED_TOKEN, tok
            )

        raise self.error(
            f"Unexpected token: {tok.kind} ({tok.text!r})",
            ErrorKind.UNEXPECTED_TOKEN,
            tok,
        )

    def led(self, tok: Token, left: Expr) -> Expr:
        """Infix-position behaviour of ``tok`` with ``left`` already parsed."""
        if tok.kind == TokenKind.OPERATOR:
            assert tok.operator is not None
            right = self.expression(tok.operator.rbp)
            return BinaryExpr(op=BinaryOp(tok.text), left=left, right=right)

        # Only "(" reaches here: it is the one non-operator with lbp > 0
        raise self.error(
            f"Unexpected token {tok.text!r} after an operand",
            ErrorKind.UNEXPECTED_TOKEN,
            tok,
        )


def parse_expr(source: str, *, trace: bool | None = None) -> Expr:
    """Parse an expression string into a tree.

    Args:
        source: Expression string (e.g., "sin x * y^2")
        trace: Force DEBUG tracing on or off; None defers to the environment.

    Returns:
        Parsed expression tree.

    Raises:
        LexicalError: If tokenization fails.
        ExpressionSyntaxError: If the tokens do not form one complete expression.
    """
    tracing = should_trace_parsing(trace)
    try:
        tokens = tokenize(source)
        if tracing:
            logger.debug("tokens for %r: %s", source, tokens)
        expr = _Parser(tokens, source).parse()
    except ParseError as e:
        logger.debug("failed to parse %r: %s (%s)", source, e.message, e.kind)
        raise

    if tracing:
        logger.debug("parsed %r: %r", source, expr)
    return expr


@dataclass(frozen=True)
class ParseResult:
    """Outcome of ``try_parse``: exactly one of ``tree`` and ``error`` is set."""

    tree: Expr | None = None
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error else None

    def unwrap(self) -> Expr:
        """Return the tree, or re-raise the parse error."""
        if self.error is not None:
            raise self.error
        assert self.tree is not None
        return self.tree


def try_parse(source: str, *, trace: bool | None = None) -> ParseResult:
    """Parse without raising; failures come back as ``ParseResult.error``."""
    try:
        return ParseResult(tree=parse_expr(source, trace=trace))
    except ParseError as e:
        return ParseResult(error=e)
