from .base import (
    GuestDetailsInput,
    MainAction,
    PaymentAmountInput,
    RoomNumberInput,
    SessionAdapter,
)
from .console_adapter import ConsoleSessionAdapter

__all__ = [
    "GuestDetailsInput",
    "MainAction",
    "PaymentAmountInput",
    "RoomNumberInput",
    "SessionAdapter",
    "ConsoleSessionAdapter",
]
