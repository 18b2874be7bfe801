"""Template Method demo - data pipelines, game levels and recipes."""
import sys
from typing import List

from pattern_catalogue.patterns.behavioral.template_method.levels import BossLevel, GameLevel, TutorialLevel
from pattern_catalogue.patterns.behavioral.template_method.processors import (
    CSVDataProcessor,
    DataProcessor,
    JSONDataProcessor,
)
from pattern_catalogue.patterns.behavioral.template_method.recipes import PastaRecipe, Recipe, SteakRecipe


def main() -> int:
    print("=== Template Method Pattern Demo ===")

    print("\n1. Data Processing Framework:")
    print("=" * 50)
    processors: List[DataProcessor] = [
        CSVDataProcessor("sales_data.csv"),
        JSONDataProcessor("https://api.example.com/users"),
        JSONDataProcessor("https://api.example.com/broken", payload="{users: ["),
    ]
    for processor in processors:
        print(f"\nUsing: {processor.processor_type()}")
        processor.process()

    print("\n2. Game Level Framework:")
    print("=" * 50)
    levels: List[GameLevel] = [TutorialLevel(), BossLevel(), BossLevel(player_damage=10, boss_damage=30)]
    for level in levels:
        level.play()

    print("\n\n3. Cooking Recipe Framework:")
    print("=" * 50)
    recipes: List[Recipe] = [PastaRecipe(), SteakRecipe()]
    for recipe in recipes:
        recipe.cook()
    return 0


if __name__ == "__main__":
    sys.exit(main())
