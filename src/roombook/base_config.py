"""
Base configuration abstractions for RoomBook.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from roombook.services import BookingRegistry, BookingService, PaymentSelector, RoomFactory


class RoomBookConfig(ABC):
    """Abstract configuration contract for booking sessions."""

    @abstractmethod
    def get_hotel_display_name(self) -> str: pass

    @abstractmethod
    def get_currency_symbol(self) -> str: pass

    @abstractmethod
    def get_log_level(self) -> str: pass

    def create_room_factory(self) -> RoomFactory: return RoomFactory()
    def create_registry(self) -> BookingRegistry: return BookingRegistry()

    def create_payment_selector(self) -> PaymentSelector:
        return PaymentSelector(currency_symbol=self.get_currency_symbol())

    def create_booking_service(self) -> BookingService:
        return BookingService(
            registry=self.create_registry(),
            room_factory=self.create_room_factory(),
            payment_selector=self.create_payment_selector(),
        )
