"""Coffee types, their resource recipes and the machine's initial stock levels."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

INITIAL_COFFEE_BEANS = 100
INITIAL_WATER_LEVEL = 1000
INITIAL_CUPS = 10
INITIAL_REVENUE = 0.0
INITIAL_MILK_LEVEL = 1000


@dataclass(frozen=True)
class CoffeeRecipe:
    """Resources needed to brew one cup of a given coffee."""

    coffee_beans_required: int
    water_required: int
    cups_required: int
    milk_required: int


class CoffeeType(Enum):
    """The coffees the machine can brew."""

    ESPRESSO = "Espresso"
    CAPPUCCINO = "Cappuccino"
    LATTE = "Latte"

    def __str__(self) -> str:
        return self.value


_RECIPES = {
    CoffeeType.ESPRESSO: CoffeeRecipe(10, 30, 1, 0),
    CoffeeType.CAPPUCCINO: CoffeeRecipe(12, 60, 1, 10),
    CoffeeType.LATTE: CoffeeRecipe(10, 200, 1, 15),
}


def get_coffee_recipe(coffee_type: CoffeeType | str) -> CoffeeRecipe:
    """Return the recipe for ``coffee_type`` (an enum member or its value)."""
    return _RECIPES[CoffeeType(coffee_type)]