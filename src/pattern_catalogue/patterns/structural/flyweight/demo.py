"""Flyweight demo - six particles, two shared sprite objects."""
import sys

from pattern_catalogue.domain.base.exceptions import UnknownTypeError
from pattern_catalogue.patterns.structural.flyweight.particles import GameWorld


def main() -> int:
    print("=== Flyweight Pattern Demo - Game Particle System ===\n")
    world = GameWorld()

    print("Creating particles:")
    world.add_particle("bullet", 10.0, 20.0, 5.0, 0.0, 1.0, "yellow")
    world.add_particle("bullet", 15.0, 25.0, 5.0, 0.0, 1.0, "red")
    world.add_particle("bullet", 20.0, 30.0, 5.0, 0.0, 1.0, "blue")
    world.add_particle("missile", 50.0, 60.0, 3.0, 2.0, 2.0, "white")
    world.add_particle("missile", 55.0, 65.0, 3.0, 2.0, 2.0, "orange")
    world.add_particle("bullet", 30.0, 35.0, 5.0, 0.0, 1.0, "green")
    try:
        world.add_particle("laser", 0.0, 0.0, 0.0, 0.0, 1.0, "purple")
    except UnknownTypeError as e:
        print(f"Skipped particle: {e}")

    print(f"\nTotal flyweight objects created: {world.factory.count()}")
    print(f"Total particle instances: {len(world.particles)}")

    print("\nSimulating game frame:", end="")
    world.update(0.016)
    world.render()
    return 0


if __name__ == "__main__":
    sys.exit(main())
