"""Game level skeleton - a turn loop with hint, success and failure hooks."""
from abc import ABC, abstractmethod

MAX_TURNS = 50


class GameLevel(ABC):
    def play(self) -> bool:
        """Play until the level reports completion; returns whether the player won."""
        print(f"\n=== Starting Level: {self.level_name()} ===")
        self.initialize()
        self.show_introduction()

        turns = 0
        while not self.is_complete() and turns < MAX_TURNS:
            self.process_input()
            self.update_state()
            self.render_frame()
            if self.should_show_hint():
                self.show_hint()
            turns += 1

        won = self.is_successful()
        if won:
            self.show_success()
            self.unlock_next_level()
        else:
            self.show_failure()
            if self.allow_retry():
                self.offer_retry()

        self.cleanup()
        print("=== Level Complete ===")
        return won

    @abstractmethod
    def level_name(self) -> str:
        pass

    @abstractmethod
    def initialize(self) -> None:
        pass

    @abstractmethod
    def process_input(self) -> None:
        pass

    @abstractmethod
    def update_state(self) -> None:
        pass

    @abstractmethod
    def render_frame(self) -> None:
        pass

    @abstractmethod
    def is_complete(self) -> bool:
        pass

    @abstractmethod
    def is_successful(self) -> bool:
        pass

    def show_introduction(self) -> None:
        print(f"Welcome to {self.level_name()}!")

    def should_show_hint(self) -> bool:
        return False

    def show_hint(self) -> None:
        print("Hint: Keep trying!")

    def show_success(self) -> None:
        print("Level completed successfully!")

    def show_failure(self) -> None:
        print("Level failed!")

    def unlock_next_level(self) -> None:
        print("Next level unlocked!")

    def allow_retry(self) -> bool:
        return True

    def offer_retry(self) -> None:
        print("Press R to retry")

    def cleanup(self) -> None:
        print("Cleaning up level resources")


class TutorialLevel(GameLevel):
    """Completes after three player actions; hints once after the first."""

    def __init__(self):
        self.actions = 0
        self.completed = False

    def level_name(self) -> str:
        return "Tutorial"

    def initialize(self) -> None:
        print("Setting up tutorial environment...")
        self.actions = 0
        self.completed = False

    def show_introduction(self) -> None:
        print("Welcome to the tutorial! Learn the basics here.")

    def process_input(self) -> None:
        print("Processing tutorial input...")
        self.actions += 1

    def update_state(self) -> None:
        print(f"Updating tutorial state (action {self.actions})")
        if self.actions >= 3:
            self.completed = True

    def render_frame(self) -> None:
        print("Rendering tutorial frame")

    def is_complete(self) -> bool:
        return self.completed

    def is_successful(self) -> bool:
        return self.completed

    def should_show_hint(self) -> bool:
        return self.actions == 1

    def show_hint(self) -> None:
        print("Hint: Try moving around and interacting with objects!")


class BossLevel(GameLevel):
    """Player deals ``player_damage`` a turn, the boss answers with ``boss_damage``."""

    def __init__(self, player_damage: int = 20, boss_damage: int = 15):
        self.player_damage = player_damage
        self.boss_damage = boss_damage
        self.boss_health = 100
        self.player_health = 100
        self.turn = 0

    def level_name(self) -> str:
        return "Boss Battle"

    def initialize(self) -> None:
        print("Initializing boss arena...")
        self.boss_health = 100
        self.player_health = 100
        self.turn = 0

    def show_introduction(self) -> None:
        print("A mighty boss appears! Prepare for battle!")

    def process_input(self) -> None:
        print("Player attacks boss!")
        self.boss_health -= self.player_damage
        self.turn += 1

    def update_state(self) -> None:
        if self.boss_health > 0 and self.player_health > 0:
            print("Boss attacks player!")
            self.player_health -= self.boss_damage
        print(f"Boss HP: {self.boss_health}, Player HP: {self.player_health}")

    def render_frame(self) -> None:
        print("Rendering epic boss battle!")

    def is_complete(self) -> bool:
        return self.boss_health <= 0 or self.player_health <= 0

    def is_successful(self) -> bool:
        return self.boss_health <= 0 < self.player_health

    def should_show_hint(self) -> bool:
        return self.turn == 2 and self.boss_health > 60

    def show_hint(self) -> None:
        print("Hint: Try using special attacks for more damage!")

    def show_success(self) -> None:
        print("Boss defeated! You are victorious!")

    def show_failure(self) -> None:
        print("You have been defeated by the boss!")
