from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from roombook.exceptions import BookingError, PaymentError
from roombook.models import Feature, GuestRecord, Room, RoomKind, wrap
from roombook.services.booking_registry import BookingRegistry
from roombook.services.payment_service import PaymentMethod, PaymentSelector
from roombook.services.room_factory import RoomFactory

logger = logging.getLogger(__name__)


@dataclass
class BookingResult:
    """Outcome of a completed booking."""

    guest: GuestRecord
    payment_method: PaymentMethod
    notice: str = ""  # message broadcast to every holder
    effects: List[str] = field(default_factory=list)


class BookingService:
    """
    Drives one booking session: builds and decorates the room, takes the payment,
    registers the guest, finalizes the booking and notifies every holder.
    Also answers room detail lookups.
    """

    def __init__(self, registry: BookingRegistry,
                 room_factory: RoomFactory,
                 payment_selector: PaymentSelector
                ):
        self.registry = registry
        self.room_factory = room_factory
        self.payment_selector = payment_selector

    def create_room(self, kind: Union[RoomKind, str]) -> Room:
        return self.room_factory.create_room(kind)

    def add_feature(self, room: Room, feature: Union[Feature, str]) -> Room:
        decorated = wrap(feature, room)
        logger.info(f"{decorated.feature.value} added to the room.")
        return decorated

    def complete_booking(self, guest: GuestRecord, room: Room,
                         payment_method: object, amount: float) -> BookingResult:
        """
        Pays, registers `guest` with `room` and books it.
        Nothing is charged for an already registered guest, and a rejected payment
        leaves the registry untouched.
        """
        if guest.registered:
            raise BookingError(f"{guest.full_name} already holds room {guest.room_number}")

        payer = self.payment_selector.select(payment_method)
        try:
            payer.pay(amount)
        except PaymentError as e:
            logger.error(f"Payment failed for {guest.full_name}: {e}")
            raise
        logger.info(f"Payment successful for {guest.full_name}")

        guest.attach_room(room)
        self.registry.register(guest)

        effects = room.book()
        notice = f"Room booked with selected features for {guest.name} {guest.surname}"
        self.registry.broadcast(notice)

        return BookingResult(guest=guest, payment_method=payer.method, notice=notice, effects=effects)

    def get_room_details(self, room_number: int) -> Optional[Dict[str, Any]]:
        """Guest and feature details for `room_number`, or None when nobody holds it."""
        holder = self.registry.find_by_room_number(room_number)
        if holder is None:
            logger.info(f"Room with number {room_number} not found.")
            return None
        return holder.to_dict()
