"""Game checkpoints."""
from pydantic import BaseModel, ConfigDict


class GameMemento(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: int
    score: int
    lives: int
    x: int
    y: int


class Game:
    def __init__(self):
        self.level = 1
        self.score = 0
        self.lives = 3
        self.x = 0
        self.y = 0

    def _describe(self) -> str:
        return (
            f"Level {self.level}, Score {self.score}, Lives {self.lives}, "
            f"Position ({self.x},{self.y})"
        )

    def save(self) -> GameMemento:
        print(f"Game saved: {self._describe()}")
        return GameMemento(level=self.level, score=self.score, lives=self.lives, x=self.x, y=self.y)

    def restore(self, memento: GameMemento) -> None:
        self.level = memento.level
        self.score = memento.score
        self.lives = memento.lives
        self.x = memento.x
        self.y = memento.y
        print(f"Game restored: {self._describe()}")
