"""MVC demo - manage users through the controller, then swap views."""
import sys

from pattern_catalogue.patterns.behavioral.mvc.controller import UserController
from pattern_catalogue.patterns.behavioral.mvc.model import UserModel
from pattern_catalogue.patterns.behavioral.mvc.views import ConsoleView, FramedView, JsonView


def main() -> int:
    print("=== MVC Pattern Demo ===\n")

    controller = UserController(UserModel(), FramedView())
    controller.add_user(1, "Alice Johnson", "alice@example.com")
    controller.add_user(2, "Bob Smith", "bob@example.com")
    controller.add_user(3, "Charlie Brown", "charlie@example.com")

    print()
    controller.show_user_count()

    print("\nShowing user with ID 2:")
    controller.show_user(2)

    print("\nShowing all users:")
    controller.show_all_users()

    print("\nTrying to show user with ID 999:")
    controller.show_user(999)

    print("\nTesting error handling:")
    controller.add_user(4, "", "invalid@example.com")
    controller.add_user(1, "Duplicate", "duplicate@example.com")

    print("\nRemoving user with ID 2:")
    controller.remove_user(2)
    controller.show_user_count()
    controller.remove_user(2)

    print("\n=== Using Plain View ===")
    controller.set_view(ConsoleView())
    controller.show_user(1)

    print("\n=== Using JSON View ===")
    json_controller = UserController(UserModel(), JsonView())
    json_controller.add_user(1, "John Doe", "john@example.com")
    json_controller.show_user(1)
    return 0


if __name__ == "__main__":
    sys.exit(main())
