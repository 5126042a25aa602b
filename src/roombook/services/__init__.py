from .room_factory import RoomFactory
from .booking_registry import BookingRegistry
from .payment_service import (
    CashPayment,
    CreditCardPayment,
    CryptoPayment,
    PaymentMethod,
    PaymentSelector,
    PaymentStrategy,
)
from .booking_service import BookingResult, BookingService

__all__ = [
    "RoomFactory",
    "BookingRegistry",
    "PaymentMethod",
    "PaymentStrategy",
    "CreditCardPayment",
    "CryptoPayment",
    "CashPayment",
    "PaymentSelector",
    "BookingResult",
    "BookingService",
]
