"""
Intermediate representation for graphy: the expression tree.
"""

from .expressions import (
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

__all__ = [
    "BinaryExpr",
    "BinaryOp",
    "Expr",
    "FuncCall",
    "Literal",
    "UnaryExpr",
    "UnaryOp",
    "Variable",
    "VariableRef",
]
