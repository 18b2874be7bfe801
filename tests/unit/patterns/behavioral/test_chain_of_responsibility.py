"""Tests for the handler chains."""
import pytest

from pattern_catalogue.domain.base.exceptions import NoHandlerError
from pattern_catalogue.patterns.behavioral.chain_of_responsibility import (
    NO_HELP_TOPIC,
    Application,
    Bank,
    Bitcoin,
    Button,
    ConsoleLogger,
    Dialog,
    EmailLogger,
    FileLogger,
    LogHandler,
    LogLevel,
    LogRequest,
    PayPal,
    SupportHandler,
    SupportTicket,
)


class TestAccountChain:
    """Test payment across accounts."""

    def setup_method(self):
        """Set up Bank(100) -> PayPal(200) -> Bitcoin(300)."""
        self.bitcoin = Bitcoin(300)
        self.paypal = PayPal(200, self.bitcoin)
        self.bank = Bank(100, self.paypal)

    def test_pay_falls_through_to_bitcoin(self, capsys):
        """Test paying 250 is forwarded twice and settled by Bitcoin."""
        self.bank.pay(250)

        assert capsys.readouterr().out == (
            "Cannot pay using Bank. Proceeding...\n"
            "Cannot pay using PayPal. Proceeding...\n"
            "Paid 250 using Bitcoin\n"
        )
        assert self.bitcoin.balance == 50
        assert self.bank.balance == 100

    def test_first_able_account_pays(self, capsys):
        """Test an affordable amount never leaves the first account."""
        self.bank.pay(100)
        assert capsys.readouterr().out == "Paid 100 using Bank\n"
        assert self.bank.balance == 0

    def test_no_account_can_pay(self):
        """Test exhausting the chain raises."""
        with pytest.raises(NoHandlerError, match="None of the accounts have enough balance."):
            self.bank.pay(1000)

    def test_set_next_returns_successor(self):
        """Test set_next allows fluent chain building."""
        head = Bank(10)
        tail = head.set_next(PayPal(20))
        assert head.successor is tail


class TestHelpChain:
    """Test context-sensitive help."""

    def setup_method(self):
        """Set up application <- dialog <- buttons."""
        self.application = Application(1)
        self.dialog = Dialog(self.application, 2)
        self.with_topic = Button(self.dialog, 3)
        self.without_topic = Button(self.dialog, NO_HELP_TOPIC)

    def test_button_with_topic_answers(self, capsys):
        """Test a button with a topic shows its own help."""
        self.with_topic.handle_help()
        assert capsys.readouterr().out == "Button Help\n"

    def test_button_without_topic_defers(self, capsys):
        """Test a button without a topic defers to its dialog."""
        self.without_topic.handle_help()
        assert capsys.readouterr().out == "Dialog Help\n"

    def test_set_handler_reroutes(self, capsys):
        """Test changing successor and topic at runtime."""
        self.dialog.set_handler(self.application, NO_HELP_TOPIC)
        self.without_topic.handle_help()
        assert capsys.readouterr().out == "Application Help\n"

    def test_orphan_without_topic(self):
        """Test a widget with no topic and no successor raises."""
        with pytest.raises(NoHandlerError, match="No help available"):
            Button(None, NO_HELP_TOPIC).handle_help()


class TestLoggingChain:
    """Test every handler sees each request."""

    def setup_method(self):
        """Set up console -> file -> email."""
        self.console = ConsoleLogger(LogLevel.INFO, "ConsoleLogger")
        self.console.set_next(FileLogger(LogLevel.WARNING, "error.log", "FileLogger")).set_next(
            EmailLogger(LogLevel.CRITICAL, "admin@company.com", "EmailLogger")
        )

    def test_info_reaches_console_only(self, capsys):
        """Test an info message is written by the console alone."""
        self.console.handle(LogRequest(LogLevel.INFO, "Started", "Main"))
        assert capsys.readouterr().out == "[CONSOLE] ConsoleLogger: [INFO] Started (from Main)\n"

    def test_critical_reaches_every_handler(self, capsys):
        """Test a critical message is written by all three handlers in order."""
        self.console.handle(LogRequest(LogLevel.CRITICAL, "Disk failure", "Storage"))
        lines = capsys.readouterr().out.splitlines()

        assert lines[0].startswith("[CONSOLE]")
        assert lines[1] == (
            "[FILE] FileLogger: Writing to 'error.log': [CRITICAL] Disk failure (from Storage)"
        )
        assert lines[2].startswith("[EMAIL] EmailLogger: Sending alert to 'admin@company.com'")
        assert lines[3] == "  Subject: Critical Error Alert"

    def test_handler_base_is_abstract(self):
        """Test a link must say how it writes."""
        with pytest.raises(TypeError):
            LogHandler(LogLevel.INFO, "Bare")


class TestSupportChain:
    """Test ticket escalation."""

    def setup_method(self):
        """Set up Level1(1) -> Level2(3) -> Manager(4)."""
        self.level1 = SupportHandler(1, "Level1")
        self.level1.set_next(SupportHandler(3, "Level2")).set_next(SupportHandler(4, "Manager"))

    @pytest.mark.parametrize(
        "priority,department", [(0, "Level1"), (1, "Level1"), (3, "Level2"), (4, "Manager")]
    )
    def test_escalation(self, priority, department):
        """Test each ticket lands with the first department able to take it."""
        assert self.level1.handle(SupportTicket(priority, "issue", "source")) == department

    def test_unhandled_priority(self, capsys):
        """Test a ticket beyond every cap escalates then raises."""
        with pytest.raises(NoHandlerError, match="Manager department: No one can handle priority 5"):
            self.level1.handle(SupportTicket(5, "Time travel request", "Help Desk"))
        assert capsys.readouterr().out.count("escalating...") == 2
