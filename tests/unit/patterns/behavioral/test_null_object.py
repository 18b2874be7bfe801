"""Tests for the guest customer and the silent logger."""
import pytest

from pattern_catalogue.patterns.behavioral.null_object.customers import (
    CustomerRepository,
    CustomerService,
    NullCustomer,
    RealCustomer,
)
from pattern_catalogue.patterns.behavioral.null_object.loggers import (
    Application,
    ConsoleLogger,
    NullLogger,
)


class TestCustomers:
    """Test real and null customers behave interchangeably."""

    def setup_method(self):
        """Set up a repository with two customers."""
        self.repository = CustomerRepository()
        self.repository.add(RealCustomer(1, "John Doe", "john@example.com", 75))
        self.repository.add(RealCustomer(2, "Jane Smith", "jane@example.com", 150))
        self.service = CustomerService(self.repository)

    @pytest.mark.parametrize("points,discount", [(0, 5), (50, 5), (51, 10), (101, 15)])
    def test_discount_tiers(self, points, discount):
        """Test the loyalty discount tiers."""
        assert RealCustomer(1, "A", "a@example.com", points).discount() == discount

    def test_missing_customer_is_guest(self):
        """Test an unknown id yields the shared guest, never None."""
        guest = self.repository.find(999)
        assert isinstance(guest, NullCustomer)
        assert guest.is_null()
        assert self.repository.find(998) is guest

    def test_order_prices(self):
        """Test discounts applied per customer kind."""
        assert self.service.process_order(1, "Laptop", 1000.0) == pytest.approx(900.0)
        assert self.service.process_order(2, "Mouse", 50.0) == pytest.approx(42.5)
        assert self.service.process_order(999, "Keyboard", 100.0) == pytest.approx(100.0)

    def test_guest_order_transcript(self, capsys):
        """Test a guest order asks for registration."""
        self.service.process_order(999, "Keyboard", 100.0)
        out = capsys.readouterr().out
        assert "Welcome, guest!" in out
        assert "Please register to purchase: Keyboard" in out
        assert "Note: This was a guest purchase" in out

    def test_purchase_earns_points(self):
        """Test a real purchase adds loyalty points."""
        customer = self.repository.find(1)
        customer.purchase("Laptop")
        assert customer.loyalty_points == 85


class TestLoggers:
    """Test the application never checks for a missing logger."""

    def test_default_logger_is_silent(self, capsys):
        """Test an application without a logger prints nothing."""
        app = Application()
        assert isinstance(app.logger, NullLogger)
        app.run()
        assert capsys.readouterr().out == ""

    def test_console_logger(self, capsys):
        """Test the console logger prints each event."""
        Application(ConsoleLogger()).run()
        assert capsys.readouterr().out.splitlines() == [
            "[INFO] Application starting",
            "[DEBUG] Processing data",
            "[INFO] Application finished",
        ]
