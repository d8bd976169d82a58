import pytest

from coffeesim.inventory import InsufficientResourcesError, InventoryModel
from coffeesim.recipes import (
    INITIAL_COFFEE_BEANS,
    INITIAL_CUPS,
    INITIAL_MILK_LEVEL,
    INITIAL_WATER_LEVEL,
    CoffeeRecipe,
)


def _spy(model):
    calls = []
    model.inventory_updated.connect(lambda: calls.append(True))
    return calls


def _levels(model):
    return (model.coffee_beans, model.water_level, model.cups, model.milk)


def test_initial_levels_match_configuration():
    model = InventoryModel()
    assert _levels(model) == (
        INITIAL_COFFEE_BEANS,
        INITIAL_WATER_LEVEL,
        INITIAL_CUPS,
        INITIAL_MILK_LEVEL,
    )


def test_has_sufficient_resources():
    model = InventoryModel()
    assert model.has_sufficient_resources(CoffeeRecipe(5, 50, 1, 10))
    assert not model.has_sufficient_resources(CoffeeRecipe(model.coffee_beans + 1, 0, 0, 0))
    assert not model.has_sufficient_resources(CoffeeRecipe(0, model.water_level + 1, 0, 0))
    assert not model.has_sufficient_resources(CoffeeRecipe(0, 0, model.cups + 1, 0))
    assert not model.has_sufficient_resources(CoffeeRecipe(0, 0, 0, model.milk + 1))


def test_update_resources_sufficient():
    model = InventoryModel()
    spy = _spy(model)
    recipe = CoffeeRecipe(10, 100, 1, 20)
    beans, water, cups, milk = _levels(model)
    assert model.has_sufficient_resources(recipe)
    model.update_resources(recipe)
    assert len(spy) == 1
    assert model.coffee_beans == beans - recipe.coffee_beans_required
    assert model.water_level == water - recipe.water_required
    assert model.cups == cups - recipe.cups_required
    assert model.milk == milk - recipe.milk_required


def test_update_resources_insufficient_raises_and_leaves_stock():
    model = InventoryModel()
    spy = _spy(model)
    recipe = CoffeeRecipe(0, 0, model.cups + 1, 0)
    before = _levels(model)
    with pytest.raises(InsufficientResourcesError):
        model.update_resources(recipe)
    assert spy == []
    assert _levels(model) == before


def test_update_resources_exact_match_empties_stock():
    model = InventoryModel()
    recipe = CoffeeRecipe(model.coffee_beans, model.water_level, model.cups, model.milk)
    spy = _spy(model)
    assert model.has_sufficient_resources(recipe)
    model.update_resources(recipe)
    assert len(spy) == 1
    assert _levels(model) == (0, 0, 0, 0)


def test_multiple_sequential_updates():
    model = InventoryModel()
    recipe = CoffeeRecipe(1, 10, 1, 2)
    spy = _spy(model)
    count = 0
    while model.has_sufficient_resources(recipe):
        model.update_resources(recipe)
        count += 1
        assert len(spy) == count
    assert not model.has_sufficient_resources(recipe)
    assert all(level >= 0 for level in _levels(model))
    # Cups are the scarcest resource for this recipe.
    assert count == INITIAL_CUPS


def test_refill_coffee_beans():
    model = InventoryModel()
    spy = _spy(model)
    before = model.coffee_beans
    model.refill_coffee_beans(15)
    assert model.coffee_beans == before + 15
    assert len(spy) == 1


def test_refill_water():
    model = InventoryModel()
    spy = _spy(model)
    before = model.water_level
    model.refill_water(200)
    assert model.water_level == before + 200
    assert len(spy) == 1


def test_refill_cups():
    model = InventoryModel()
    spy = _spy(model)
    before = model.cups
    model.refill_cups(5)
    assert model.cups == before + 5
    assert len(spy) == 1


def test_refill_milk():
    model = InventoryModel()
    spy = _spy(model)
    before = model.milk
    model.refill_milk(50)
    assert model.milk == before + 50
    assert len(spy) == 1


def test_refill_zero_amount_still_notifies():
    model = InventoryModel()
    spy = _spy(model)
    before = model.coffee_beans
    model.refill_coffee_beans(0)
    assert model.coffee_beans == before
    assert len(spy) == 1


def test_negative_refill_reduces_level():
    model = InventoryModel()
    spy = _spy(model)
    before = model.water_level
    model.refill_water(-50)
    assert model.water_level == before - 50
    assert len(spy) == 1


def test_levels_after_series_of_refills():
    model = InventoryModel()
    beans, water, cups, milk = _levels(model)
    model.refill_coffee_beans(10)
    model.refill_water(100)
    model.refill_cups(2)
    model.refill_milk(20)
    assert _levels(model) == (beans + 10, water + 100, cups + 2, milk + 20)