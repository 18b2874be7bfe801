"""Mediator demo - broadcast between colleagues, then an authentication dialog."""
import sys

from pattern_catalogue.patterns.behavioral.mediator.colleagues import Colleague, ConcreteMediator
from pattern_catalogue.patterns.behavioral.mediator.dialog import AuthDialog


def run_colleagues() -> None:
    mediator = ConcreteMediator()
    first = Colleague(mediator, 1)
    second = Colleague(mediator, 2)
    Colleague(mediator, 3)
    first.send("hello")
    second.send("yeah")


def run_dialog() -> None:
    print("\n=== Mediator Pattern Demo - Authentication Dialog ===\n")
    dialog = AuthDialog()

    print("\n=== Initial State ===")
    print("OK button is disabled, password field is disabled")
    print("User list and clear button are disabled\n")

    print("=== User Interaction Simulation ===")
    print("1. User types username:")
    dialog.username.set_text("john_doe")

    print("\n2. User types password:")
    dialog.password.set_text("secret123")

    print("\n3. User checks 'Remember Me':")
    dialog.remember.click()

    print("\n4. User types another username:")
    dialog.username.set_text("jane_smith")

    print("\n5. User selects from user list:")
    dialog.user_list.select_item(0)

    print("\n6. User clicks Login:")
    dialog.ok_button.click()

    print("\n7. User clicks Clear:")
    dialog.clear_button.click()

    print("\n8. User clicks Cancel:")
    dialog.cancel_button.click()


def main() -> int:
    run_colleagues()
    run_dialog()
    return 0


if __name__ == "__main__":
    sys.exit(main())
