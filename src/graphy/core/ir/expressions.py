"""
Expression tree types for graphy.

Frozen pydantic models, one per syntactic construct:
- Literal: a numeric constant (number literals and named constants)
- VariableRef: x or y
- UnaryExpr: +operand, -operand
- BinaryExpr: left op right for + - * / ^
- FuncCall: a named unary function applied to one argument

Children are required fields, so every tree built through validation is
complete. Trees are immutable and safe to share between threads.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Operators and variables
# ---------------------------------------------------------------------------


class BinaryOp(StrEnum):
    """Binary operators for expressions."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    POW = "^"


class UnaryOp(StrEnum):
    """Unary operators for expressions."""

    POS = "+"
    NEG = "-"


class Variable(StrEnum):
    """The two free variables an expression may reference."""

    X = "x"
    Y = "y"


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A numeric literal or a resolved named constant."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)


class VariableRef(BaseModel):
    """Reference to one of the free variables."""

    name: Variable

    model_config = ConfigDict(frozen=True)


class UnaryExpr(BaseModel):
    """Unary operation: op operand."""

    op: UnaryOp
    operand: Expr

    model_config = ConfigDict(frozen=True)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    op: BinaryOp
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)


class FuncCall(BaseModel):
    """
    Application of a built-in unary function.

    The function is held by its name in the read-only function table; see
    ``graphy.core.expression_lang.symbols.FUNCTIONS``.
    """

    name: str = Field(description="Function name")
    argument: Expr = Field(description="The single argument")

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def _known_function(cls, name: str) -> str:
        # Deferred: the expression_lang package imports this module
        from graphy.core.expression_lang.symbols import FUNCTIONS

        if name not in FUNCTIONS:
            raise ValueError(f"unknown function {name!r}")
        return name


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | VariableRef | UnaryExpr | BinaryExpr | FuncCall

# Rebuild models for recursive forward references
UnaryExpr.model_rebuild()
BinaryExpr.model_rebuild()
FuncCall.model_rebuild()
