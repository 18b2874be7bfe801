"""Template Method pattern - a fixed algorithm skeleton with overridable steps and hooks."""
from .levels import BossLevel, GameLevel, TutorialLevel
from .processors import CSVDataProcessor, DataProcessor, JSONDataProcessor
from .recipes import PastaRecipe, Recipe, SteakRecipe

__all__ = [
    "BossLevel",
    "CSVDataProcessor",
    "DataProcessor",
    "GameLevel",
    "JSONDataProcessor",
    "PastaRecipe",
    "Recipe",
    "SteakRecipe",
    "TutorialLevel",
]
