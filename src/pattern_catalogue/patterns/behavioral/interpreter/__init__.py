"""Interpreter pattern - a grammar of expression classes evaluated against a context."""
from .expressions import (
    AddExpression,
    And,
    BinaryExpression,
    BooleanExpression,
    Constant,
    Context,
    DivideExpression,
    Expression,
    FunctionalExpression,
    MultiplyExpression,
    Not,
    NumberExpression,
    Or,
    SubtractExpression,
    VariableExpression,
)
from .parser import ExpressionParser, parse
from .program import AssignCommand, Command, PrintCommand, Program

__all__ = [
    "AddExpression",
    "And",
    "AssignCommand",
    "BinaryExpression",
    "BooleanExpression",
    "Command",
    "Constant",
    "Context",
    "DivideExpression",
    "Expression",
    "ExpressionParser",
    "FunctionalExpression",
    "MultiplyExpression",
    "Not",
    "NumberExpression",
    "Or",
    "PrintCommand",
    "Program",
    "SubtractExpression",
    "VariableExpression",
    "parse",
]
