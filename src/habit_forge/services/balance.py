"""Currency balance account."""

import logging
from typing import Callable

from ..errors import InsufficientFundsError, ValidationError

logger = logging.getLogger(__name__)


class BalanceAccount:
    """Integer balance that never goes negative.

    credit() and debit() are the only ways to change the balance.
    Listeners are called after each successful change.
    """

    def __init__(self, balance: int = 0):
        if balance < 0:
            raise ValueError("Balance cannot start negative")
        self._balance = balance
        self._listeners: list[Callable[[int], None]] = []

    @property
    def balance(self) -> int:
        return self._balance

    def add_listener(self, listener: Callable[[int], None]) -> None:
        """Register a callback receiving the new balance."""
        self._listeners.append(listener)

    def can_afford(self, amount: int) -> bool:
        return self._balance - amount >= 0

    def credit(self, amount: int) -> int:
        """Add a positive amount and return the new balance."""
        _check_amount(amount)
        self._balance += amount
        logger.info(f"Credited {amount}, balance now {self._balance}")
        self._notify()
        return self._balance

    def debit(self, amount: int) -> int:
        """Subtract an amount if funds allow and return the new balance.

        Raises:
            InsufficientFundsError: if the balance would go negative
        """
        _check_amount(amount)
        if not self.can_afford(amount):
            logger.debug(f"Debit of {amount} rejected, balance {self._balance}")
            raise InsufficientFundsError(amount, self._balance)
        self._balance -= amount
        logger.info(f"Debited {amount}, balance now {self._balance}")
        self._notify()
        return self._balance

    def top_up(self, amount) -> int:
        """User-initiated deposit of virtual currency."""
        logger.info(f"Top-up requested: {amount}")
        return self.credit(amount)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self._balance)


def _check_amount(amount) -> None:
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise ValidationError("amount", "Amount must be a positive whole number.")
