"""
Console channel: the interactive booking menu.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from roombook.adapters import MainAction, SessionAdapter
from roombook.exceptions import RoomBookError
from roombook.models import Feature, GuestRecord
from roombook.services import BookingResult, BookingService

logger = logging.getLogger(__name__)


# ------------------------------------
# Helpers
# ------------------------------------

def format_room_details(details: Dict[str, Any]) -> List[str]:
    lines = [
        f"Room Details for Room Number {details['room_number']}:",
        f"Guest Name: {details['name']}",
        f"Guest Surname: {details['surname']}",
        f"Guest Number: {details['guest_count']}",
    ]
    if details.get("kind"):
        lines.append(f"Room Type: {details['kind']}")
    if details.get("features"):
        lines.append("Features:")
        lines.extend(f"- {feature}" for feature in details["features"])
    else:
        lines.append("Features: none")
    return lines


# ------------------------------------
# Flows
# ------------------------------------

def book_room_flow(service: BookingService, adapter: SessionAdapter) -> Optional[BookingResult]:
    """Runs one booking from room type selection to notification. None if the guest backs out."""
    kind = adapter.choose_room_kind(service.room_factory.available_kinds())
    if kind is None:
        return None

    room_number = adapter.ask_room_number()
    room = service.create_room(kind)

    details = adapter.ask_guest_details()
    guest = GuestRecord(
        name=details.name,
        surname=details.surname,
        guest_count=details.guest_count,
        room_number=room_number,
    )

    while True:
        feature = adapter.choose_feature(list(Feature))
        if feature is None:
            break
        room = service.add_feature(room, feature)
        adapter.show(f"{feature.value} added to the room.")

    method = adapter.choose_payment_method(service.payment_selector.available_methods())
    amount = adapter.ask_payment_amount()

    result = service.complete_booking(guest, room, method, amount)
    adapter.show(f"Payment successful for {guest.full_name}")
    for effect in result.effects:
        adapter.show(effect)
    adapter.show(f"Notified {len(service.registry)} holder(s): {result.notice}")
    return result


def show_room_details(service: BookingService, adapter: SessionAdapter) -> Optional[Dict[str, Any]]:
    room_number = adapter.ask_room_number("Enter room number to view details: ")
    details = service.get_room_details(room_number)
    if details is None:
        adapter.show(f"Room with number {room_number} not found.")
        return None

    adapter.show("")
    for line in format_room_details(details):
        adapter.show(line)
    return details


def run_console_session(service: BookingService, adapter: SessionAdapter,
                        hotel_name: str = "the Hotel Management System") -> None:
    """Main menu loop. Returns when the guest picks Exit."""
    logger.info(f"Console session started for {hotel_name}")
    while True:
        action = adapter.choose_main_action()
        if action is MainAction.EXIT:
            adapter.show(f"Exiting {hotel_name}. Thank you!")
            logger.info("Console session finished")
            return

        try:
            if action is MainAction.BOOK:
                book_room_flow(service, adapter)
            else:
                show_room_details(service, adapter)
        except RoomBookError as e:
            logger.error(f"Booking session error: {e}")
            adapter.show(f"Error: {e}")
