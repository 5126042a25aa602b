from __future__ import annotations

from enum import Enum
from typing import List, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from roombook.models import Feature, RoomKind
from roombook.services import PaymentMethod


class MainAction(Enum):
    BOOK = 1
    VIEW = 2
    EXIT = 3


# --- PYDANTIC INPUT SCHEMAS ---

class MenuChoiceInput(BaseModel):
    choice: int = Field(description="Menu option number")


class RoomNumberInput(BaseModel):
    room_number: int = Field(ge=0, description="Room number (non-negative integer)")


class GuestDetailsInput(BaseModel):
    """Guest fields collected before a booking is finalized."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, description="Guest first name")
    surname: str = Field(min_length=1, description="Guest surname")
    guest_count: int = Field(ge=0, description="Number of guests (non-negative integer)")


class PaymentAmountInput(BaseModel):
    amount: float = Field(ge=0, allow_inf_nan=False, description="Payment amount (non-negative)")


@runtime_checkable
class SessionAdapter(Protocol):
    """Supplies validated selections and fields to a booking session."""

    # menus
    def choose_main_action(self) -> MainAction: ...
    def choose_room_kind(self, kinds: List[RoomKind]) -> Optional[RoomKind]: ...
    def choose_feature(self, features: List[Feature]) -> Optional[Feature]: ...
    def choose_payment_method(self, methods: List[PaymentMethod]) -> object: ...

    # fields
    def ask_room_number(self, prompt: str = "Enter room number: ") -> int: ...
    def ask_guest_details(self) -> GuestDetailsInput: ...
    def ask_payment_amount(self) -> float: ...

    # output
    def show(self, message: str) -> None: ...
