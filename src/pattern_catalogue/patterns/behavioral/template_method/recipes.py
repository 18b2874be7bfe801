"""Recipe skeleton - optional preparation, side dish and garnish steps."""
from abc import ABC, abstractmethod


class Recipe(ABC):
    def cook(self) -> None:
        print(f"\nCooking: {self.dish_name()}")
        print(f"Estimated time: {self.estimated_minutes()} minutes")
        if self.requires_preparation():
            self.prepare_ingredients()
        self.preheat()
        self.cook_main_dish()
        if self.needs_side_dish():
            self.prepare_side_dish()
        if self.requires_garnish():
            self.add_garnish()
        self.plate()
        print(f"{self.dish_name()} is ready to serve!")

    @abstractmethod
    def dish_name(self) -> str:
        pass

    @abstractmethod
    def estimated_minutes(self) -> int:
        pass

    @abstractmethod
    def prepare_ingredients(self) -> None:
        pass

    @abstractmethod
    def cook_main_dish(self) -> None:
        pass

    @abstractmethod
    def plate(self) -> None:
        pass

    def requires_preparation(self) -> bool:
        return True

    def needs_side_dish(self) -> bool:
        return False

    def requires_garnish(self) -> bool:
        return False

    def preheat(self) -> None:
        print("Preheating oven to 350°F")

    def prepare_side_dish(self) -> None:
        print("Preparing side dish")

    def add_garnish(self) -> None:
        print("Adding garnish")


class PastaRecipe(Recipe):
    def dish_name(self) -> str:
        return "Spaghetti Carbonara"

    def estimated_minutes(self) -> int:
        return 20

    def prepare_ingredients(self) -> None:
        print("Chopping garlic, dicing bacon, grating cheese")

    def cook_main_dish(self) -> None:
        print("Boiling pasta and cooking bacon")
        print("Creating egg and cheese mixture")
        print("Combining all ingredients")

    def plate(self) -> None:
        print("Plating pasta with fresh black pepper")

    def requires_garnish(self) -> bool:
        return True

    def add_garnish(self) -> None:
        print("Adding fresh parsley and extra parmesan")


class SteakRecipe(Recipe):
    def dish_name(self) -> str:
        return "Grilled Ribeye Steak"

    def estimated_minutes(self) -> int:
        return 25

    def prepare_ingredients(self) -> None:
        print("Seasoning steak with salt and pepper")
        print("Preparing herb butter")

    def preheat(self) -> None:
        print("Preheating grill to high heat")

    def cook_main_dish(self) -> None:
        print("Grilling steak to medium-rare")
        print("Basting with herb butter")

    def needs_side_dish(self) -> bool:
        return True

    def prepare_side_dish(self) -> None:
        print("Preparing creamy mashed potatoes and grilled vegetables")

    def plate(self) -> None:
        print("Plating steak with mashed potatoes")
