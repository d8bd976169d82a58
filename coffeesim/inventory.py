"""Stock of beans, water, cups and milk inside the machine."""

from __future__ import annotations

import logging

from .recipes import (
    INITIAL_COFFEE_BEANS,
    INITIAL_CUPS,
    INITIAL_MILK_LEVEL,
    INITIAL_WATER_LEVEL,
    CoffeeRecipe,
)
from .signals import Signal

_log = logging.getLogger(__name__)


class InsufficientResourcesError(Exception):
    """Raised when the stock cannot cover a recipe."""


class InventoryModel:
    """Tracks resource levels; ``inventory_updated`` fires on every change."""

    def __init__(self) -> None:
        self._coffee_beans = INITIAL_COFFEE_BEANS
        self._water_level = INITIAL_WATER_LEVEL
        self._cups = INITIAL_CUPS
        self._milk = INITIAL_MILK_LEVEL
        self.inventory_updated = Signal()

    @property
    def coffee_beans(self) -> int:
        return self._coffee_beans

    @property
    def water_level(self) -> int:
        return self._water_level

    @property
    def cups(self) -> int:
        return self._cups

    @property
    def milk(self) -> int:
        return self._milk

    def has_sufficient_resources(self, recipe: CoffeeRecipe) -> bool:
        """Whether every resource covers what ``recipe`` needs."""
        return (
            self._coffee_beans >= recipe.coffee_beans_required
            and self._water_level >= recipe.water_required
            and self._cups >= recipe.cups_required
            and self._milk >= recipe.milk_required
        )

    def update_resources(self, recipe: CoffeeRecipe) -> None:
        """Consume the resources of ``recipe``; the stock is left untouched on failure."""
        if not self.has_sufficient_resources(recipe):
            raise InsufficientResourcesError(
                "Not enough resources to brew this type of coffee."
            )
        self._coffee_beans -= recipe.coffee_beans_required
        self._water_level -= recipe.water_required
        self._cups -= recipe.cups_required
        self._milk -= recipe.milk_required
        self.inventory_updated.emit()

    def refill_coffee_beans(self, amount: int) -> None:
        self._coffee_beans += amount
        _log.debug("Refilled coffee beans by %s. New level: %s", amount, self._coffee_beans)
        self.inventory_updated.emit()

    def refill_water(self, amount: int) -> None:
        self._water_level += amount
        _log.debug("Refilled water by %s ml. New level: %s", amount, self._water_level)
        self.inventory_updated.emit()

    def refill_cups(self, amount: int) -> None:
        self._cups += amount
        _log.debug("Refilled cups by %s. New level: %s", amount, self._cups)
        self.inventory_updated.emit()

    def refill_milk(self, amount: int) -> None:
        self._milk += amount
        _log.debug("Refilled milk by %s. New level: %s", amount, self._milk)
        self.inventory_updated.emit()