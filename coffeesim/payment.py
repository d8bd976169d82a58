"""Customer balance and the revenue the machine has taken."""

from __future__ import annotations

import logging

from .recipes import INITIAL_REVENUE
from .signals import Signal

_log = logging.getLogger(__name__)


class PaymentModel:
    """Holds the customer's balance and accumulated revenue.

    Signals: ``balance_updated(new_balance)``, ``payment_processed(amount)``
    and ``payment_failed(amount)``.
    """

    def __init__(self) -> None:
        self._balance = 0.0
        self._revenue = INITIAL_REVENUE
        self.balance_updated = Signal()
        self.payment_processed = Signal()
        self.payment_failed = Signal()

    @property
    def balance(self) -> float:
        return self._balance

    @property
    def revenue(self) -> float:
        return self._revenue

    def add_balance(self, amount: float) -> None:
        """Add ``amount`` (which may be negative) to the balance."""
        self._balance += amount
        self.balance_updated.emit(self._balance)
        _log.debug("Added $%s to balance. New balance: $%s", amount, self._balance)

    def process_payment(self, amount: float) -> bool:
        """Charge ``amount`` if the balance covers it; return whether it was charged."""
        if amount <= self._balance:
            self._balance -= amount
            self._revenue += amount
            self.balance_updated.emit(self._balance)
            self.payment_processed.emit(amount)
            _log.debug("Payment of $%s processed successfully.", amount)
            return True
        self.payment_failed.emit(amount)
        _log.debug("Insufficient funds. Payment of $%s failed.", amount)
        return False