from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Type

from roombook.exceptions import PaymentError
from roombook.models import lookup_choice

logger = logging.getLogger(__name__)


class PaymentMethod(Enum):
    CREDIT_CARD = "Credit Card"
    CRYPTO = "Crypto"
    CASH = "Cash"


class PaymentStrategy(ABC):
    """Pays an amount through one payment method."""

    method: PaymentMethod

    def __init__(self, currency_symbol: str = "$"):
        self.currency_symbol = currency_symbol

    @abstractmethod
    def describe(self) -> str:
        pass

    def pay(self, amount: float) -> None:
        if not math.isfinite(amount):
            raise PaymentError(f"Payment amount must be a finite number, got {amount}")
        if amount < 0:
            raise PaymentError(f"Payment amount must not be negative, got {amount}")
        logger.info(f"Paid with {self.describe()}: {self.currency_symbol}{amount:.2f}")


class CreditCardPayment(PaymentStrategy):
    method = PaymentMethod.CREDIT_CARD

    def describe(self) -> str:
        return "credit card"


class CryptoPayment(PaymentStrategy):
    method = PaymentMethod.CRYPTO

    def describe(self) -> str:
        return "crypto"


class CashPayment(PaymentStrategy):
    method = PaymentMethod.CASH

    def describe(self) -> str:
        return "cash"


_STRATEGIES: Dict[PaymentMethod, Type[PaymentStrategy]] = {
    PaymentMethod.CREDIT_CARD: CreditCardPayment,
    PaymentMethod.CRYPTO: CryptoPayment,
    PaymentMethod.CASH: CashPayment,
}


class PaymentSelector:
    """
    Maps a payment method tag to a payer.

    Unknown tags never fail: they fall back to credit card payment.
    """

    def __init__(self, currency_symbol: str = "$"):
        self.currency_symbol = currency_symbol

    def available_methods(self) -> List[PaymentMethod]:
        return list(PaymentMethod)

    def select(self, tag: object) -> PaymentStrategy:
        method = lookup_choice(PaymentMethod, tag)
        if method is None:
            logger.warning(f"Unknown payment method {tag!r}, using default payment method: Credit Card")
            method = PaymentMethod.CREDIT_CARD
        return _STRATEGIES[method](currency_symbol=self.currency_symbol)
