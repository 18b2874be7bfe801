"""Abstract Factory demo - three full widget families, then the two-widget kit."""
import sys

from pattern_catalogue.domain.base.exceptions import DomainException
from pattern_catalogue.patterns.creational.abstract_factory.dialog import (
    Dialog,
    MacFactory,
    WindowsFactory,
)
from pattern_catalogue.patterns.creational.abstract_factory.widgets import Application, get_factory

PLATFORMS = ["Windows", "macOS", "Linux", "BeOS"]


def main() -> int:
    print("=== Abstract Factory Pattern Demo ===")

    for platform in PLATFORMS:
        print("\n" + "=" * 50)
        try:
            factory = get_factory(platform)
        except DomainException as e:
            print(f"Error creating UI for {platform}: {e}")
            continue

        app = Application(factory)
        app.create_ui()
        app.render_ui()
        app.simulate_interaction()

        families = set(app.families())
        verdict = "consistent" if families == {factory.theme()} else "MIXED"
        print(f"Widget families: {', '.join(sorted(families))} ({verdict})")

    print("\n--- GUI Abstract Factory ---\n")
    print("Creating Windows Application:")
    Dialog(WindowsFactory()).render()
    print("\nCreating Mac Application:")
    Dialog(MacFactory()).render()
    return 0


if __name__ == "__main__":
    sys.exit(main())
