"""Interactive text front panel for the coffee machine."""

from __future__ import annotations

import argparse
import shlex
from typing import Iterator, Sequence

from .brewing import BrewingEngine, BrewingModel
from .inventory import InsufficientResourcesError
from .machine import THANKS_MESSAGE, CoffeeMachine, MachineError, RefillItem
from .maintenance import MaintenanceModel
from .recipes import CoffeeType

BANNER = "☕ Coffee Machine Simulation"

HELP = """Commands:
  menu                     show menu and resources
  espresso | cappuccino | latte
  funds [AMOUNT]           add funds (default 10)
  refill ITEM [AMOUNT]     refill beans, water or cups (default 10)
  check                    check maintenance status
  maintenance              perform maintenance
  logs                     show the log history
  help                     show this help
  quit                     leave"""

_ORDERS = {
    "espresso": CoffeeType.ESPRESSO,
    "cappuccino": CoffeeType.CAPPUCCINO,
    "latte": CoffeeType.LATTE,
}

_ITEMS = {
    "beans": RefillItem.COFFEE_BEANS,
    "coffee": RefillItem.COFFEE_BEANS,
    "coffee beans": RefillItem.COFFEE_BEANS,
    "water": RefillItem.WATER,
    "cups": RefillItem.CUPS,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="coffeesim", description=BANNER)
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="run brewing and maintenance without simulated waits",
    )
    return parser


def _build_machine(no_delay: bool) -> CoffeeMachine:
    if no_delay:
        return CoffeeMachine(
            brewing=BrewingModel(BrewingEngine(step_delay=0)),
            maintenance=MaintenanceModel(step_delay=0),
        )
    return CoffeeMachine()


def _lines() -> Iterator[str]:
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


def _refill(machine: CoffeeMachine, args: list[str]) -> None:
    amount = 10
    if args and args[-1].lstrip("-").isdigit():
        amount = int(args.pop())
    name = " ".join(args).lower()
    try:
        item = _ITEMS[name]
    except KeyError:
        raise ValueError(f"unknown item {name!r}; choose beans, water or cups") from None
    machine.refill(item, amount)


def _run(machine: CoffeeMachine, line: str) -> bool:
    """Carry out one command; return False when the session should end."""
    words = shlex.split(line)
    if not words:
        return True
    command, args = words[0].lower(), words[1:]
    if command in ("quit", "exit"):
        return False
    if command in _ORDERS:
        machine.order(_ORDERS[command])
        print(THANKS_MESSAGE)
        print(machine.menu_text())
    elif command == "funds":
        machine.add_funds(float(args[0]) if args else 10.0)
        print(machine.menu_text())
    elif command == "refill":
        _refill(machine, args)
        print(machine.menu_text())
    elif command == "check":
        print("Maintenance is REQUIRED." if machine.check_maintenance() else "No maintenance needed.")
    elif command == "maintenance":
        machine.perform_maintenance()
        print(machine.menu_text())
    elif command == "logs":
        machine.show_logs()
    elif command == "menu":
        print(machine.menu_text())
    elif command == "help":
        print(HELP)
    else:
        print(f"Unknown command: {command}. Type 'help' for commands.")
    return True


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    machine = _build_machine(args.no_delay)
    machine.brewing.brewing_step_changed.connect(print)
    machine.notice.connect(lambda title, text: print(f"{title}: {text}"))

    print(BANNER)
    print(machine.menu_text())
    for line in _lines():
        try:
            if not _run(machine, line):
                break
        except (MachineError, InsufficientResourcesError, ValueError) as exc:
            print(f"Error: {exc}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())