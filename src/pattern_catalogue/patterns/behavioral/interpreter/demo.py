"""Interpreter demo - arithmetic, a pricing formula, booleans, a program and error cases."""
import sys

from pattern_catalogue.domain.base.exceptions import EvaluationError, ExpressionSyntaxError
from pattern_catalogue.patterns.behavioral.interpreter.expressions import (
    And,
    Constant,
    Context,
    FunctionalExpression,
    Not,
    Or,
)
from pattern_catalogue.patterns.behavioral.interpreter.parser import parse
from pattern_catalogue.patterns.behavioral.interpreter.program import AssignCommand, PrintCommand, Program

ARITHMETIC = ["x + y", "x * y - z", "(x + y) * z", "x / y + z * 2", "100 - x * 5"]
BROKEN = ["x + * y", "(x + y", "x + q", "x / (y - 5)", ""]


def _evaluate(source: str, context: Context) -> None:
    expression = parse(source)
    print(f"\nExpression: {source}")
    print(f"Parsed as: {expression}")
    print("Evaluation steps:")
    print(f"Result: {expression.interpret(context)}")


def main() -> int:
    print("=== Interpreter Pattern Demo ===")

    print("\n1. Arithmetic Expressions:")
    context = Context()
    context.set_variable("x", 10)
    context.set_variable("y", 5)
    context.set_variable("z", 3)
    for source in ARITHMETIC:
        _evaluate(source, context)

    print("\n2. Pricing Formula:")
    pricing = Context()
    pricing.set_variable("price", 200)
    pricing.set_variable("tax_rate", 8)
    pricing.set_variable("discount", 15)
    _evaluate("price + price * tax_rate / 100 - discount", pricing)

    print("\n3. Boolean Expressions:")
    rules = [
        And(Constant(True), Not(Constant(False))),
        Or(Constant(False), And(Constant(True), Constant(False))),
    ]
    for rule in rules:
        print(f"\nExpression: {rule}")
        print(f"Result: {'true' if rule.evaluate(context) else 'false'}")

    print("\n4. Statement Program:")
    program = Program()
    program.add(AssignCommand("total", parse("x * y")))
    program.add(AssignCommand("total", parse("total + z")))
    program.add(PrintCommand(parse("total * 2")))
    program.run(context)

    print("\n5. Functional Interpreter:")
    formula = FunctionalExpression.variable("x") * FunctionalExpression.number(3) + FunctionalExpression.variable("y")
    print(f"Expression: {formula.description}")
    print(f"Result: {formula.evaluate(context)}")

    print("\n6. Error Handling:")
    for source in BROKEN:
        try:
            _evaluate(source, context)
        except (ExpressionSyntaxError, EvaluationError) as e:
            print(f"Error in '{source}': {e}")

    print("\nFinal context:")
    context.display_variables()
    return 0


if __name__ == "__main__":
    sys.exit(main())
