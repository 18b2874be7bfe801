"""Arithmetic and boolean expression trees evaluated against a variable context."""
import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict

from pattern_catalogue.domain.base.exceptions import EvaluationError
from pattern_catalogue.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Context:
    """Variable bindings shared by every expression in one evaluation."""

    def __init__(self):
        self._variables: Dict[str, int] = {}

    def set_variable(self, name: str, value: int) -> None:
        self._variables[name] = value
        print(f"Set variable {name} = {value}")

    def get_variable(self, name: str) -> int:
        """
        Look up a bound variable.

        Raises:
            EvaluationError: If the variable has never been set
        """
        try:
            return self._variables[name]
        except KeyError as e:
            raise EvaluationError(f"Variable '{name}' not found") from e

    def has_variable(self, name: str) -> bool:
        return name in self._variables

    def variables(self) -> Dict[str, int]:
        return dict(sorted(self._variables.items()))

    def display_variables(self) -> None:
        print("Variables:")
        for name, value in self.variables().items():
            print(f"  {name} = {value}")

    def clear(self) -> None:
        self._variables.clear()


class Expression(ABC):
    @abstractmethod
    def interpret(self, context: Context) -> int:
        pass

    @abstractmethod
    def __str__(self) -> str:
        pass


class NumberExpression(Expression):
    def __init__(self, value: int):
        self.value = value

    def interpret(self, context: Context) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class VariableExpression(Expression):
    def __init__(self, name: str):
        self.name = name

    def interpret(self, context: Context) -> int:
        return context.get_variable(self.name)

    def __str__(self) -> str:
        return self.name


def _truncating_divide(left: int, right: int) -> int:
    if right == 0:
        raise EvaluationError("Division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left >= 0) == (right >= 0) else -quotient


class BinaryExpression(Expression):
    """Evaluates both operands left to right, then prints and returns the step."""

    symbol = "?"
    apply: Callable[[int, int], int]

    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def interpret(self, context: Context) -> int:
        left_value = self.left.interpret(context)
        right_value = self.right.interpret(context)
        result = type(self).apply(left_value, right_value)
        print(f"  {left_value} {self.symbol} {right_value} = {result}")
        return result

    def __str__(self) -> str:
        return f"({self.left} {self.symbol} {self.right})"


class AddExpression(BinaryExpression):
    symbol = "+"
    apply = staticmethod(operator.add)


class SubtractExpression(BinaryExpression):
    symbol = "-"
    apply = staticmethod(operator.sub)


class MultiplyExpression(BinaryExpression):
    symbol = "*"
    apply = staticmethod(operator.mul)


class DivideExpression(BinaryExpression):
    """Integer division truncating toward zero."""

    symbol = "/"
    apply = staticmethod(_truncating_divide)


# Boolean grammar

def _word(value: bool) -> str:
    return "true" if value else "false"


class BooleanExpression(ABC):
    @abstractmethod
    def evaluate(self, context: Context) -> bool:
        pass

    @abstractmethod
    def __str__(self) -> str:
        pass


class Constant(BooleanExpression):
    def __init__(self, value: bool):
        self.value = value

    def evaluate(self, context: Context) -> bool:
        return self.value

    def __str__(self) -> str:
        return _word(self.value)


class And(BooleanExpression):
    def __init__(self, left: BooleanExpression, right: BooleanExpression):
        self.left = left
        self.right = right

    def evaluate(self, context: Context) -> bool:
        left_value = self.left.evaluate(context)
        right_value = self.right.evaluate(context)
        result = left_value and right_value
        print(f"  {_word(left_value)} AND {_word(right_value)} = {_word(result)}")
        return result

    def __str__(self) -> str:
        return f"({self.left} AND {self.right})"


class Or(BooleanExpression):
    def __init__(self, left: BooleanExpression, right: BooleanExpression):
        self.left = left
        self.right = right

    def evaluate(self, context: Context) -> bool:
        left_value = self.left.evaluate(context)
        right_value = self.right.evaluate(context)
        result = left_value or right_value
        print(f"  {_word(left_value)} OR {_word(right_value)} = {_word(result)}")
        return result

    def __str__(self) -> str:
        return f"({self.left} OR {self.right})"


class Not(BooleanExpression):
    def __init__(self, operand: BooleanExpression):
        self.operand = operand

    def evaluate(self, context: Context) -> bool:
        value = self.operand.evaluate(context)
        print(f"  NOT {_word(value)} = {_word(not value)}")
        return not value

    def __str__(self) -> str:
        return f"(NOT {self.operand})"


@dataclass(frozen=True)
class FunctionalExpression:
    """Closure-based expression: behaviour is a function, not a class per rule."""

    evaluate: Callable[[Context], int]
    description: str

    @classmethod
    def number(cls, value: int) -> "FunctionalExpression":
        return cls(lambda context: value, str(value))

    @classmethod
    def variable(cls, name: str) -> "FunctionalExpression":
        return cls(lambda context: context.get_variable(name), name)

    def __add__(self, other: "FunctionalExpression") -> "FunctionalExpression":
        return FunctionalExpression(
            lambda context: self.evaluate(context) + other.evaluate(context),
            f"({self.description} + {other.description})",
        )

    def __mul__(self, other: "FunctionalExpression") -> "FunctionalExpression":
        return FunctionalExpression(
            lambda context: self.evaluate(context) * other.evaluate(context),
            f"({self.description} * {other.description})",
        )
