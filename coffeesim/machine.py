"""The coffee machine: ordering, funds, refills and maintenance over the models."""

from __future__ import annotations

from enum import Enum
from typing import TextIO

from .brewing import BrewingModel
from .eventlog import LoggerModel
from .inventory import InsufficientResourcesError, InventoryModel
from .maintenance import MaintenanceModel
from .payment import PaymentModel
from .recipes import CoffeeType, get_coffee_recipe
from .signals import Signal

PRICES = {
    CoffeeType.ESPRESSO: 5.0,
    CoffeeType.CAPPUCCINO: 6.0,
    CoffeeType.LATTE: 7.0,
}
MAX_FUNDS = 999999.0
MAX_REFILL = 99999
AUTO_MAINTENANCE_ORDERS = 2
THANKS_MESSAGE = "🙏 Thanks for using our coffee machine! ☕"


class MachineError(Exception):
    """Base class for refused machine operations."""


class MaintenanceRequiredError(MachineError):
    """Raised when an order is placed while maintenance is due."""


class PaymentFailedError(MachineError):
    """Raised when the balance does not cover an order."""


class RefillItem(Enum):
    """Resources that can be refilled from the front panel."""

    COFFEE_BEANS = "Coffee Beans"
    WATER = "Water"
    CUPS = "Cups"


def _num(value: float) -> str:
    return f"{value:g}"


def coffee_cup_style(level: int) -> str:
    """Style sheet for the cup display filled to ``level`` percent (clamped to 0-100)."""
    level = max(0, min(int(level), 100))
    return (
        "QLabel#lblCoffeeCup {"
        "   font-size: 24px;"
        "   font-weight: bold;"
        "   color: white;"
        "   text-align: center;"
        "   border-radius: 30px 30px 15px 15px;"
        "   padding: 10px;"
        "   border: 6px solid rgba(62, 39, 35, 0.8);"
        "   min-width: 90px;"
        "   min-height: 140px;"
        "   background: qlineargradient(x1:0, y1:1, x2:0, y2:0, "
        f"       stop:0 rgba(62, 39, 35, {_num(1.0 if level > 0 else 0.0)}), "
        f"       stop:{_num(level / 100.0)} rgba(111, 78, 55, {_num(0.9 if level > 0 else 0.0)}), "
        f"       stop:0.85 rgba(166, 123, 91, {_num(0.6 if level > 0 else 0.0)}), "
        f"       stop:1 rgba(210, 180, 140, {_num(0.3 if level > 90 else 0.0)})); "
        "   box-shadow: 5px 5px 12px rgba(0,0,0,0.3);"
        "}"
    )


class CoffeeMachine:
    """Ties payment, inventory, brewing, maintenance and logging together.

    ``notice(title, text)`` fires for informational messages, such as an
    automatic maintenance trigger. ``brewing_display`` holds the brewing
    steps shown for the latest order.
    """

    def __init__(
        self,
        *,
        payment: PaymentModel | None = None,
        inventory: InventoryModel | None = None,
        brewing: BrewingModel | None = None,
        maintenance: MaintenanceModel | None = None,
        logger: LoggerModel | None = None,
    ) -> None:
        self.payment = payment if payment is not None else PaymentModel()
        self.inventory = inventory if inventory is not None else InventoryModel()
        self.brewing = brewing if brewing is not None else BrewingModel()
        self.maintenance = maintenance if maintenance is not None else MaintenanceModel()
        self.logger = logger if logger is not None else LoggerModel()
        self.notice = Signal()
        self.brewing_display: list[str] = []
        self._order_count = 0

        self.brewing.brewing_step_changed.connect(self.brewing_display.append)
        self.payment.add_balance(0.0)
        self.logger.log_event("Initial funds added: $50.0")

    def order(self, coffee_type: CoffeeType | str) -> None:
        """Check, charge for and brew one coffee; raise if the order is refused."""
        coffee_type = CoffeeType(coffee_type)
        price = PRICES[coffee_type]

        if self.maintenance.needs_maintenance:
            self.logger.log_event(
                "Attempted to order coffee while maintenance was required."
            )
            raise MaintenanceRequiredError(
                "Please perform maintenance before ordering coffee!"
            )

        recipe = get_coffee_recipe(coffee_type)
        if not self.inventory.has_sufficient_resources(recipe):
            self.logger.log_error("Insufficient inventory for selected coffee.")
            raise InsufficientResourcesError("Not enough resources to brew coffee!")

        if not self.payment.process_payment(price):
            self.logger.log_error("Payment failed due to insufficient funds.")
            raise PaymentFailedError("Not enough funds!")

        self.inventory.update_resources(recipe)
        self.logger.log_event(f"Coffee order processed: {coffee_type.value}")

        self.brewing_display.clear()
        self.brewing.start_brewing()
        self.brewing.handle_brew_state_change()
        self.brewing.stop_brewing()

        self._order_count += 1
        if self._order_count >= AUTO_MAINTENANCE_ORDERS:
            self.notice.emit(
                "Maintenance Triggered",
                "** Automatic Maintenance Triggered due to usage **",
            )
            self.maintenance.trigger_maintenance()
            self.logger.log_event("Automatic maintenance triggered after 2 orders.")
            self._order_count = 0

    def order_espresso(self) -> None:
        self.order(CoffeeType.ESPRESSO)

    def order_cappuccino(self) -> None:
        self.order(CoffeeType.CAPPUCCINO)

    def order_latte(self) -> None:
        self.order(CoffeeType.LATTE)

    def add_funds(self, amount: float) -> None:
        """Add ``amount`` (0 to 999999, rounded to cents) to the balance."""
        amount = float(amount)
        if not 0.0 <= amount <= MAX_FUNDS:
            raise ValueError(f"amount must be between 0 and {_num(MAX_FUNDS)}")
        amount = round(amount, 2)
        self.payment.add_balance(amount)
        self.logger.log_event(f"Funds added: ${_num(amount)}")

    def refill(self, item: RefillItem | str, amount: int) -> None:
        """Refill one resource by ``amount`` (0 to 99999)."""
        item = RefillItem(item)
        if not 0 <= amount <= MAX_REFILL:
            raise ValueError(f"amount must be between 0 and {MAX_REFILL}")
        if item is RefillItem.COFFEE_BEANS:
            self.inventory.refill_coffee_beans(amount)
            self.logger.log_event(f"Refilled coffee beans by {amount}")
        elif item is RefillItem.WATER:
            self.inventory.refill_water(amount)
            self.logger.log_event(f"Refilled water by {amount} ml")
        else:
            self.inventory.refill_cups(amount)
            self.logger.log_event(f"Refilled cups by {amount}")

    def check_maintenance(self) -> bool:
        """Record and return whether maintenance is due."""
        required = self.maintenance.needs_maintenance
        status = "REQUIRED" if required else "NOT required"
        self.logger.log_event(f"Checked maintenance status: {status}")
        return required

    def perform_maintenance(self) -> bool:
        """Run maintenance; return whether any was needed."""
        performed = self.maintenance.perform_maintenance()
        self.logger.log_event("Maintenance performed by user.")
        return performed

    def menu_text(self) -> str:
        """The menu, the resource levels and the maintenance status."""
        inv = self.inventory
        status = (
            "⚠️ Maintenance Required!\n"
            if self.maintenance.needs_maintenance
            else "✅ All Good\n"
        )
        return (
            "☕ **Coffee Menu**\n"
            "------------------------\n"
            "1. Espresso - $5.00\n"
            "2. Cappuccino - $6.00\n"
            "3. Latte - $7.00\n\n"
            "📦 **Available Resources**\n"
            "------------------------\n"
            f"💰 Balance: ${_num(self.payment.balance)}\n"
            f"💵 Revenue: ${_num(self.payment.revenue)}\n"
            f"☕ Coffee Beans: {inv.coffee_beans}\n"
            f"💧 Water Level: {inv.water_level} ml\n"
            f"🥛 Milk Level: {inv.milk} ml\n"
            f"🥤 Cups: {inv.cups}\n"
            "\n🔧 **Maintenance Status**\n"
            "------------------------\n"
            f"{status}"
        )

    def show_logs(self, stream: TextIO | None = None) -> None:
        self.logger.show_logs(stream)