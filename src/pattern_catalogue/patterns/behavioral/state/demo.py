"""State demo - vending machine scenarios and a ticking traffic light."""
import sys

from pattern_catalogue.patterns.behavioral.state.traffic_light import TrafficLight
from pattern_catalogue.patterns.behavioral.state.vending import VendingMachine

TRAFFIC_TICKS = 30


def main() -> int:
    print("=== State Pattern Demo - Vending Machine ===\n")
    machine = VendingMachine()

    print("=== Scenario 1: Successful Purchase ===")
    machine.request()
    machine.insert_money(1.50)
    machine.select_item("Soda", 1.25)
    machine.dispense_item()

    print("\n=== Scenario 2: Insufficient Funds ===")
    machine.insert_money(0.75)
    machine.select_item("Chips", 1.00)
    machine.dispense_item()
    machine.insert_money(0.50)
    machine.dispense_item()

    print("\n=== Scenario 3: Out of Stock ===")
    machine.item_count = 0
    machine.insert_money(2.00)
    machine.select_item("Candy", 1.50)
    machine.dispense_item()

    print("\n=== Scenario 4: Restock ===")
    machine.restock(3)
    machine.insert_money(1.50)
    machine.select_item("Candy", 1.50)
    machine.dispense_item()

    print("\n=== Final State ===")
    print(f"Current state: {machine.state_name}")
    print(f"Balance: ${machine.balance:.2f}")
    print(f"Items in stock: {machine.item_count}")

    print("\n=== Traffic Light ===")
    light = TrafficLight()
    print(f"Simulating traffic light for {TRAFFIC_TICKS} ticks:")
    for _ in range(TRAFFIC_TICKS):
        light.update()
    print(f"Final light: {light.color} ({light.time_remaining}s remaining)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
