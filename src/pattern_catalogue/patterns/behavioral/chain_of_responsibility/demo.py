"""Chain of Responsibility demo - accounts, help topics, log routing and support tickets."""
import sys

from pattern_catalogue.domain.base.exceptions import NoHandlerError
from pattern_catalogue.patterns.behavioral.chain_of_responsibility.accounts import (
    Bank,
    Bitcoin,
    PayPal,
)
from pattern_catalogue.patterns.behavioral.chain_of_responsibility.help import (
    NO_HELP_TOPIC,
    Application,
    Button,
    Dialog,
)
from pattern_catalogue.patterns.behavioral.chain_of_responsibility.log_chain import (
    ConsoleLogger,
    EmailLogger,
    FileLogger,
    LogLevel,
    LogRequest,
)
from pattern_catalogue.patterns.behavioral.chain_of_responsibility.support import (
    SupportHandler,
    SupportTicket,
)

PRINT_TOPIC = 1
PAPER_ORIENTATION_TOPIC = 2
APPLICATION_TOPIC = 3


def run_accounts() -> None:
    print("1. Payment Accounts:")
    bank = Bank(100)
    paypal = PayPal(200)
    bitcoin = Bitcoin(300)
    bank.set_next(paypal).set_next(bitcoin)

    bank.pay(250)
    try:
        bank.pay(500)
    except NoHandlerError as e:
        print(f"Payment failed: {e}")


def run_help() -> None:
    print("\n2. Context Help:")
    application = Application(APPLICATION_TOPIC)
    dialog = Dialog(application, PRINT_TOPIC)
    button1 = Button(dialog, PAPER_ORIENTATION_TOPIC)
    button2 = Button(dialog, NO_HELP_TOPIC)
    button1.handle_help()
    button2.handle_help()

    orphan = Button(None, NO_HELP_TOPIC)
    try:
        orphan.handle_help()
    except NoHandlerError as e:
        print(f"Help request dropped: {e}")


def run_logging() -> None:
    print("\n3. Logging Chain Example:")
    print("Setting up logging chain: Console -> File -> Email\n")
    console = ConsoleLogger(LogLevel.INFO, "ConsoleLogger")
    console.set_next(FileLogger(LogLevel.WARNING, "error.log", "FileLogger")).set_next(
        EmailLogger(LogLevel.CRITICAL, "admin@company.com", "EmailLogger")
    )

    for request in [
        LogRequest(LogLevel.INFO, "Application started", "Main"),
        LogRequest(LogLevel.WARNING, "Low disk space", "FileSystem"),
        LogRequest(LogLevel.ERROR, "Database connection failed", "Database"),
        LogRequest(LogLevel.CRITICAL, "Server crashed", "System"),
    ]:
        print(f"Sending {request.level.name} request:")
        console.handle(request)
        print()


def run_support() -> None:
    print("4. Support Ticket System Example:")
    print("Setting up support chain: Level1 -> Level2 -> Manager\n")
    level1 = SupportHandler(1, "Level1")
    level1.set_next(SupportHandler(3, "Level2")).set_next(SupportHandler(4, "Manager"))

    for label, ticket in [
        ("Simple", SupportTicket(0, "Password reset request", "User Portal")),
        ("Complex", SupportTicket(3, "System integration failure", "API Gateway")),
        ("Urgent", SupportTicket(4, "Security breach detected", "Security System")),
        ("Impossible", SupportTicket(5, "Time travel request", "Help Desk")),
    ]:
        print(f"{label} request (priority {ticket.priority}):")
        try:
            level1.handle(ticket)
        except NoHandlerError as e:
            print(e)
        print()


def main() -> int:
    print("=== Chain of Responsibility Pattern Demo ===\n")
    run_accounts()
    run_help()
    run_logging()
    run_support()
    return 0


if __name__ == "__main__":
    sys.exit(main())
