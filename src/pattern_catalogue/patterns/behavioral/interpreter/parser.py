"""Recursive-descent parser turning infix text into an expression tree."""
from typing import Dict, Type

from pattern_catalogue.domain.base.exceptions import ExpressionSyntaxError
from pattern_catalogue.infrastructure.logging.logger import get_logger
from pattern_catalogue.patterns.behavioral.interpreter.expressions import (
    AddExpression,
    BinaryExpression,
    DivideExpression,
    Expression,
    MultiplyExpression,
    NumberExpression,
    SubtractExpression,
    VariableExpression,
)

logger = get_logger(__name__)

_ADDITIVE: Dict[str, Type[BinaryExpression]] = {"+": AddExpression, "-": SubtractExpression}
_MULTIPLICATIVE: Dict[str, Type[BinaryExpression]] = {"*": MultiplyExpression, "/": DivideExpression}


class ExpressionParser:
    """
    Parse integer arithmetic over named variables.

    Grammar (whitespace is ignored, operators are left associative):

        expression := term (("+" | "-") term)*
        term       := factor (("*" | "/") factor)*
        factor     := number | identifier | "(" expression ")"
    """

    def __init__(self, text: str):
        self.text = text
        self.position = 0

    def parse(self) -> Expression:
        """
        Parse the whole input.

        Raises:
            ExpressionSyntaxError: If the input is empty, malformed or has trailing text
        """
        self.position = 0
        self._skip_whitespace()
        if self._at_end():
            raise ExpressionSyntaxError("Empty expression")
        expression = self._parse_expression()
        self._skip_whitespace()
        if not self._at_end():
            raise ExpressionSyntaxError(f"Unexpected character '{self.text[self.position]}'", self.position)
        logger.debug("Parsed expression", source=self.text, tree=str(expression))
        return expression

    def _parse_expression(self) -> Expression:
        left = self._parse_term()
        while self._peek() in _ADDITIVE:
            operator = self._advance()
            left = _ADDITIVE[operator](left, self._parse_term())
        return left

    def _parse_term(self) -> Expression:
        left = self._parse_factor()
        while self._peek() in _MULTIPLICATIVE:
            operator = self._advance()
            left = _MULTIPLICATIVE[operator](left, self._parse_factor())
        return left

    def _parse_factor(self) -> Expression:
        current = self._peek()
        if current == "":
            raise ExpressionSyntaxError("Unexpected end of expression", self.position)
        if current == "(":
            self._advance()
            inner = self._parse_expression()
            if self._peek() != ")":
                raise ExpressionSyntaxError("Expected ')'", self.position)
            self._advance()
            return inner
        if current.isdigit():
            return NumberExpression(int(self._read_while(str.isdigit)))
        if current.isalpha() or current == "_":
            return VariableExpression(self._read_while(lambda c: c.isalnum() or c == "_"))
        raise ExpressionSyntaxError(f"Unexpected character '{current}'", self.position)

    def _skip_whitespace(self) -> None:
        while not self._at_end() and self.text[self.position].isspace():
            self.position += 1

    def _at_end(self) -> bool:
        return self.position >= len(self.text)

    def _peek(self) -> str:
        self._skip_whitespace()
        return "" if self._at_end() else self.text[self.position]

    def _advance(self) -> str:
        current = self.text[self.position]
        self.position += 1
        return current

    def _read_while(self, predicate) -> str:
        start = self.position
        while not self._at_end() and predicate(self.text[self.position]):
            self.position += 1
        return self.text[start:self.position]


def parse(text: str) -> Expression:
    return ExpressionParser(text).parse()
