# coffeesim

A simulated coffee machine. It serves espresso, cappuccino and latte. Before it brews, it checks the maintenance state, checks the inventory and takes the payment. After every second order it marks maintenance as due. Each action is written to an in-memory event log.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the machine

```
coffeesim
```

This starts an interactive session in the terminal. It prints the menu and then reads commands:

| Command | Effect |
| --- | --- |
| `menu` | show the menu, balance, revenue, resource levels and maintenance status |
| `espresso`, `cappuccino`, `latte` | order a drink ($5.00, $6.00, $7.00) |
| `funds [AMOUNT]` | add funds, 0 to 999999 (default 10) |
| `refill ITEM [AMOUNT]` | refill `beans`, `water` or `cups`, 0 to 99999 (default 10) |
| `check` | report whether maintenance is due |
| `maintenance` | perform maintenance |
| `logs` | print the log history |
| `help` | list the commands |
| `quit` or `exit` | leave (end of input also ends the session) |

A refused order or a bad value prints `Error: ...` and the session goes on.

Brewing and maintenance are simulated with real waits. Each brewing operation takes about 7.5 seconds by default. To skip the waits, run:

```
coffeesim --no-delay
```

## Using the library

```python
from coffeesim.brewing import BrewingEngine, BrewingModel
from coffeesim.machine import CoffeeMachine, RefillItem
from coffeesim.maintenance import MaintenanceModel
from coffeesim.recipes import CoffeeType

machine = CoffeeMachine(
    brewing=BrewingModel(BrewingEngine(step_delay=0)),
    maintenance=MaintenanceModel(step_delay=0),
)
machine.add_funds(20.0)
machine.order(CoffeeType.ESPRESSO)      # costs $5.00
machine.order_latte()                    # costs $7.00; maintenance is now due
machine.perform_maintenance()
machine.refill(RefillItem.WATER, 500)
print(machine.menu_text())
machine.show_logs()
```

The balance starts at 0. `CoffeeMachine.order` accepts a `CoffeeType` or its value (`"Espresso"`, `"Cappuccino"`, `"Latte"`). An order can be refused in three ways:

- `MaintenanceRequiredError`: maintenance is due.
- `coffeesim.inventory.InsufficientResourcesError`: there are not enough beans, water, milk or cups.
- `PaymentFailedError`: the balance is too low.

`MaintenanceRequiredError` and `PaymentFailedError` derive from `MachineError`. `InsufficientResourcesError` is a separate exception.

`add_funds` and `refill` raise `ValueError` when the amount is out of range. `check_maintenance` and `perform_maintenance` return booleans. `brewing_display` holds the brewing steps of the latest order. `coffee_cup_style(level)` returns the style-sheet text for a cup filled to `level` percent.

### Parts

| Module | Contents |
| --- | --- |
| `coffeesim.recipes` | `CoffeeType`, `CoffeeRecipe`, `get_coffee_recipe` and the initial stock levels |
| `coffeesim.inventory` | `InventoryModel` (starts with 100 beans, 1000 ml water, 10 cups and 1000 ml milk) and `InsufficientResourcesError` |
| `coffeesim.payment` | `PaymentModel`, which holds the balance and the revenue |
| `coffeesim.maintenance` | `MaintenanceModel` |
| `coffeesim.eventlog` | `LoggerModel`, which keeps `[EVENT]` and `[ERROR]` entries |
| `coffeesim.brewing` | `BrewingEngine`, `BrewStep` and `BrewingModel` |
| `coffeesim.machine` | `CoffeeMachine`, `RefillItem`, the errors and `coffee_cup_style` |
| `coffeesim.signals` | `Signal`, a small observer used by all the models |
| `coffeesim.cli` | the `coffeesim` command |

Milk cannot be refilled through `CoffeeMachine.refill` or the `refill` command. To add milk, call `machine.inventory.refill_milk(amount)`.

### Signals

Each model sends notifications through `Signal` objects. You can connect any callable to one:

```python
from coffeesim.eventlog import LoggerModel

log = LoggerModel()
log.new_log_entry.connect(print)
log.log_event("hello")   # prints "[EVENT] hello"
```

The signals are:

- `InventoryModel.inventory_updated`
- `PaymentModel.balance_updated`, `payment_processed` and `payment_failed`
- `MaintenanceModel.maintenance_required` and `maintenance_completed`
- `LoggerModel.new_log_entry`
- `BrewingEngine.step_performed`
- `BrewingModel.brewing_step_changed` and `brewing_finished`
- `CoffeeMachine.notice`

## What it does not do

- There is no graphical display. `coffee_cup_style` only produces text, and nothing renders it.
- Nothing is stored between runs. Balance, stock, maintenance state and the log are lost when the program exits.