from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Type

from pydantic import BaseModel, ValidationError

from roombook.adapters.base import (
    GuestDetailsInput,
    MainAction,
    MenuChoiceInput,
    PaymentAmountInput,
    RoomNumberInput,
)
from roombook.models import Feature, RoomKind
from roombook.services import PaymentMethod

logger = logging.getLogger(__name__)


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    return errors[0].get("msg", str(exc))


class ConsoleSessionAdapter:
    """Terminal implementation of SessionAdapter, built on input()/print()."""

    def __init__(self, input_func: Callable[[str], str] = input,
                 output_func: Callable[[str], None] = print,
                 currency_symbol: str = "$"):
        self._input = input_func
        self._output = output_func
        self.currency_symbol = currency_symbol

    # ------------------------------------
    # Helpers
    # ------------------------------------
    def _ask(self, prompt: str, schema: Type[BaseModel], field_name: str) -> Any:
        """Prompts until the answer validates against `schema.field_name`."""
        while True:
            raw = self._input(prompt)
            try:
                return getattr(schema(**{field_name: raw.strip()}), field_name)
            except ValidationError as e:
                logger.debug(f"Rejected input {raw!r} for {field_name}: {e}")
                self.show(f"Invalid input: {_first_error(e)}")

    def _menu(self, title: str, options: List[str], prompt: str) -> int:
        self.show(f"\n{title}:")
        for number, option in enumerate(options, start=1):
            self.show(f"{number}. {option}")
        return self._ask(prompt, MenuChoiceInput, "choice")

    # ------------------------------------
    # Menus
    # ------------------------------------
    def choose_main_action(self) -> MainAction:
        options = ["Book a Room", "View Booked Room Details", "Exit"]
        while True:
            choice = self._menu("Main Menu", options, "Enter your choice: ")
            try:
                return MainAction(choice)
            except ValueError:
                self.show("Invalid choice. Please enter a number between 1 and 3.")

    def choose_room_kind(self, kinds: List[RoomKind]) -> Optional[RoomKind]:
        """Returns None when the guest goes back to the main menu."""
        options = [f"{kind.value} Room" for kind in kinds] + ["Back to Main Menu"]
        while True:
            choice = self._menu("Room Type Menu", options, "Enter your room choice: ")
            if 1 <= choice <= len(kinds):
                return kinds[choice - 1]
            if choice == len(kinds) + 1:
                return None
            self.show(f"Invalid choice. Please enter a number between 1 and {len(options)}.")

    def choose_feature(self, features: List[Feature]) -> Optional[Feature]:
        """Returns None when the guest finishes the booking."""
        options = [feature.value for feature in features] + ["Finish Booking"]
        while True:
            choice = self._menu("Room Feature Menu", options, "Enter your feature choice: ")
            if 1 <= choice <= len(features):
                return features[choice - 1]
            if choice == len(features) + 1:
                return None
            self.show(f"Invalid choice. Please enter a number between 1 and {len(options)}.")

    def choose_payment_method(self, methods: List[PaymentMethod]) -> object:
        options = [f"{method.value} Payment" for method in methods]
        choice = self._menu("Payment Method Menu", options, "Enter your payment method choice: ")
        if 1 <= choice <= len(methods):
            return methods[choice - 1]
        self.show("Invalid choice. Using default payment method: Credit Card Payment")
        return str(choice)

    # ------------------------------------
    # Fields
    # ------------------------------------
    def ask_room_number(self, prompt: str = "Enter room number: ") -> int:
        return self._ask(prompt, RoomNumberInput, "room_number")

    def ask_guest_details(self) -> GuestDetailsInput:
        while True:
            name = self._input("Enter customer name: ")
            surname = self._input("Enter customer surname: ")
            guest_count = self._input("Enter customer number: ")
            try:
                return GuestDetailsInput(name=name, surname=surname, guest_count=guest_count.strip())
            except ValidationError as e:
                self.show(f"Invalid guest details: {_first_error(e)}")

    def ask_payment_amount(self) -> float:
        return self._ask(f"Enter the payment amount: {self.currency_symbol}", PaymentAmountInput, "amount")

    # ------------------------------------
    # Output
    # ------------------------------------
    def show(self, message: str) -> None:
        self._output(message)
