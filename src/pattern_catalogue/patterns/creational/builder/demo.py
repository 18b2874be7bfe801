"""Builder demo - gaming, office and budget machines from the same builder API."""
import sys

from pattern_catalogue.domain.base.exceptions import AlreadyBuiltError
from pattern_catalogue.patterns.creational.builder.computer import ComputerBuilder, ComputerDirector

SEPARATOR = "\n" + "=" * 20 + "\n"


def main() -> int:
    print("--- Computer Builder Pattern ---\n")

    print("Building Gaming Computer:")
    ComputerDirector.build_gaming(ComputerBuilder()).display()
    print(SEPARATOR)

    print("Building Office Computer:")
    ComputerDirector.build_office(ComputerBuilder()).display()
    print(SEPARATOR)

    print("Building Budget Computer:")
    budget_builder = ComputerBuilder()
    ComputerDirector.build_budget(budget_builder).display()

    try:
        budget_builder.set_gpu("RTX 4090")
    except AlreadyBuiltError as e:
        print(f"\nBuilder reuse rejected: {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
