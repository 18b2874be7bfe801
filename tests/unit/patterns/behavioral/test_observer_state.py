"""Tests for the weather station observers, the vending machine and the traffic light states."""
import pytest

from pattern_catalogue.domain.base.exceptions import CapacityExceededError
from pattern_catalogue.patterns.behavioral.observer.weather import (
    AlertObserver,
    DisplayObserver,
    Subject,
)
from pattern_catalogue.patterns.behavioral.state import (
    GreenLight,
    HasMoneyState,
    IdleState,
    RedLight,
    TrafficLight,
    VendingMachine,
    YellowLight,
)


class TestSubject:
    """Test attachment and notification."""

    def setup_method(self):
        """Set up a station with two displays and an alert system."""
        self.station = Subject()
        self.display1 = DisplayObserver("D1")
        self.display2 = DisplayObserver("D2")
        self.alert = AlertObserver("A")
        for observer in (self.display1, self.display2, self.alert):
            self.station.attach(observer)

    def test_temperature_sequence(self, capsys):
        """Test 25, 35, detach D1, -5 produces the expected updates and alerts."""
        capsys.readouterr()
        self.station.set_state(25)
        out = capsys.readouterr().out
        assert out.count("Temperature changed to 25°C") == 2
        assert "Alert" not in out

        self.station.set_state(35)
        out = capsys.readouterr().out
        assert out.count("Temperature changed to 35°C") == 2
        assert "Alert A: WARNING! High temperature: 35°C" in out

        self.station.detach(self.display1)
        capsys.readouterr()
        self.station.set_state(-5)
        out = capsys.readouterr().out
        assert "Notifying 2 observers about state change to -5" in out
        assert "Display D1" not in out
        assert "Alert A: WARNING! Freezing temperature: -5°C" in out

    def test_notification_follows_attach_order(self, capsys):
        """Test observers are updated in the order they were attached."""
        capsys.readouterr()
        self.station.set_state(10)
        lines = capsys.readouterr().out.splitlines()
        assert lines[1].startswith("Display D1")
        assert lines[2].startswith("Display D2")

    def test_duplicate_attach_ignored(self):
        """Test attaching the same observer twice keeps one entry."""
        self.station.attach(self.display1)
        assert len(self.station.observers) == 3

    def test_detach_unknown(self):
        """Test detaching a stranger changes nothing."""
        assert not self.station.detach(DisplayObserver("D1"))
        assert len(self.station.observers) == 3

    def test_capacity_limit(self):
        """Test a full subject rejects further observers and stays unchanged."""
        station = Subject(capacity=1)
        station.attach(self.display1)
        with pytest.raises(CapacityExceededError, match="Cannot exceed observer limit: 1"):
            station.attach(self.alert)
        assert station.observers == [self.display1]


class TestVendingMachine:
    """Test state transitions."""

    def setup_method(self):
        """Set up a machine with two items in stock."""
        self.machine = VendingMachine(item_count=2)

    def test_starts_idle(self):
        """Test a new machine is idle."""
        assert isinstance(self.machine.state, IdleState)

    def test_successful_purchase(self, capsys):
        """Test paying enough dispenses, returns change and goes idle."""
        self.machine.insert_money(1.50)
        assert isinstance(self.machine.state, HasMoneyState)
        self.machine.select_item("Soda", 1.25)
        self.machine.dispense_item()

        assert self.machine.state_name == "Idle"
        assert self.machine.dispensed == ["Soda"]
        assert self.machine.item_count == 1
        assert self.machine.balance == 0
        assert "Returning $0.25" in capsys.readouterr().out

    def test_insufficient_funds(self, capsys):
        """Test short payment stays in has-money until topped up."""
        self.machine.insert_money(0.75)
        self.machine.select_item("Chips", 1.00)
        self.machine.dispense_item()
        assert self.machine.state_name == "HasMoney"
        assert "Insufficient funds. Need $0.25 more." in capsys.readouterr().out

        self.machine.insert_money(0.50)
        self.machine.dispense_item()
        assert self.machine.dispensed == ["Chips"]
        assert self.machine.state_name == "Idle"

    def test_out_of_stock_refunds(self, capsys):
        """Test an empty machine refunds and returns to idle."""
        self.machine.item_count = 0
        self.machine.insert_money(2.00)
        self.machine.select_item("Candy", 1.50)
        self.machine.dispense_item()

        out = capsys.readouterr().out
        assert "Entering out of stock state." in out
        assert "Returning $2.00" in out
        assert self.machine.state_name == "Idle"
        assert self.machine.dispensed == []

    def test_transition_runs_exit_before_enter(self, capsys):
        """Test the old state exits before the new one enters."""
        capsys.readouterr()
        self.machine.insert_money(1.00)
        out = capsys.readouterr().out
        assert out.index("Exiting idle state.") < out.index("Entering has money state.")

    def test_restock(self):
        """Test restocking adds to the stock."""
        self.machine.restock(3)
        assert self.machine.item_count == 5


class TestTrafficLight:
    """Test the tick-driven colour cycle."""

    def setup_method(self):
        """Set up a fresh light."""
        self.light = TrafficLight()

    def tick(self, count):
        for _ in range(count):
            self.light.update()

    def test_starts_red_with_full_duration(self):
        """Test a new light is red with ten ticks remaining."""
        assert isinstance(self.light.state, RedLight)
        assert self.light.time_remaining == 10

    def test_countdown_reports_remaining_time(self, capsys):
        """Test each tick counts down and prints the colour."""
        self.tick(2)
        out = capsys.readouterr().out
        assert "Traffic light: RED (9s remaining)" in out
        assert "Traffic light: RED (8s remaining)" in out
        assert self.light.time_remaining == 8

    def test_transition_happens_on_the_tick_after_zero(self, capsys):
        """Test red holds at zero for one tick before turning green."""
        self.tick(10)
        assert self.light.color == "RED"
        assert self.light.time_remaining == 0
        self.tick(1)
        assert isinstance(self.light.state, GreenLight)
        assert self.light.time_remaining == 15
        assert "Traffic light changed to: GREEN (15s)" in capsys.readouterr().out

    def test_full_cycle_order(self):
        """Test the cycle runs red, green, yellow and back to red."""
        seen = [self.light.color]
        for _ in range(60):
            self.light.update()
            if self.light.color != seen[-1]:
                seen.append(self.light.color)
        assert seen[:4] == ["RED", "GREEN", "YELLOW", "RED"]

    def test_yellow_after_green_runs_out(self):
        """Test thirty ticks end three ticks into yellow."""
        self.tick(30)
        assert isinstance(self.light.state, YellowLight)
        assert self.light.time_remaining == 0
