"""Observer demo - weather station broadcasting to displays and an alert system."""
import sys
from typing import Optional

from pattern_catalogue.config import DemoConfig, load_config
from pattern_catalogue.domain.base.exceptions import CapacityExceededError
from pattern_catalogue.patterns.behavioral.observer.weather import (
    AlertObserver,
    DisplayObserver,
    Subject,
)


def main(config: Optional[DemoConfig] = None) -> int:
    config = config or load_config().demos
    weather_station = Subject(config.observer_capacity)

    display1 = DisplayObserver("Display1")
    display2 = DisplayObserver("Display2")
    alert_system = AlertObserver("AlertSystem")

    weather_station.attach(display1)
    weather_station.attach(display2)
    weather_station.attach(alert_system)

    print("\n--- Temperature Changes ---")
    weather_station.set_state(25)
    print()
    weather_station.set_state(35)
    print()
    weather_station.detach(display1)
    weather_station.set_state(-5)

    print("\n--- Capacity Limit ---")
    small_station = Subject(capacity=1)
    small_station.attach(display2)
    try:
        small_station.attach(alert_system)
    except CapacityExceededError as e:
        print(f"Observer {alert_system.name} rejected: {e}")
    small_station.set_state(40)
    return 0


if __name__ == "__main__":
    sys.exit(main())
