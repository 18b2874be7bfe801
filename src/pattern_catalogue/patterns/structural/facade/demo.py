"""Facade demo - boot, inspect and power down through a single object."""
import sys

from pattern_catalogue.patterns.structural.facade.computer import ComputerFacade


def main() -> int:
    print("--- Computer Facade Pattern ---\n")
    computer = ComputerFacade()
    computer.start()
    computer.status()
    computer.shutdown()
    computer.status()
    return 0


if __name__ == "__main__":
    sys.exit(main())
