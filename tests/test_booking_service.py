"""
Tests for the booking session controller.
"""
import logging

import pytest

from roombook.exceptions import BookingError, PaymentError, RoomSelectionError
from roombook.models import Feature, GuestRecord, RoomKind
from roombook.services import PaymentMethod


def book(service, name, surname, room_number, kind=RoomKind.STANDARD, features=(),
         method=PaymentMethod.CREDIT_CARD, amount=100.0, guest_count=1):
    room = service.create_room(kind)
    for feature in features:
        room = service.add_feature(room, feature)
    guest = GuestRecord(name=name, surname=surname, guest_count=guest_count, room_number=room_number)
    return service.complete_booking(guest, room, method, amount)


# ============================================================================
# Tests for complete_booking()
# ============================================================================

class TestCompleteBooking:
    """Test suite for finishing a booking."""

    def test_complete_booking_registers_and_books(self, service, registry):
        result = book(service, "Ada", "Lovelace", 204, features=[Feature.EXTRA_BED, Feature.TV])

        assert registry.find_by_room_number(204) is result.guest
        assert result.guest.registered is True
        assert result.effects == [
            "Standard room booked.",
            "Extra Bed added to the room.",
            "TV added to the room.",
        ]
        assert result.payment_method is PaymentMethod.CREDIT_CARD

    def test_completion_is_broadcast_to_every_holder(self, service):
        first = book(service, "Ada", "Lovelace", 204).guest
        second = book(service, "Alan", "Turing", 101).guest

        assert first.notifications == [
            "Customer Ada Lovelace with no 1: Room booked with selected features for Ada Lovelace",
            "Customer Ada Lovelace with no 1: Room booked with selected features for Alan Turing",
        ]
        assert second.notifications == [
            "Customer Alan Turing with no 1: Room booked with selected features for Alan Turing",
        ]

    def test_unknown_payment_tag_falls_back(self, service):
        result = book(service, "Ada", "Lovelace", 204, method="Barter")
        assert result.payment_method is PaymentMethod.CREDIT_CARD

    def test_rejected_payment_leaves_registry_untouched(self, service, registry):
        with pytest.raises(PaymentError):
            book(service, "Ada", "Lovelace", 204, amount=-10)

        assert len(registry) == 0
        assert service.get_room_details(204) is None

    def test_registered_guest_is_not_charged_again(self, service, registry, caplog):
        room = service.create_room(RoomKind.STANDARD)
        guest = GuestRecord(name="Ada", surname="Lovelace", guest_count=1, room_number=204)
        service.complete_booking(guest, room, PaymentMethod.CASH, 10)

        caplog.clear()
        caplog.set_level(logging.INFO)
        with pytest.raises(BookingError):
            service.complete_booking(guest, service.create_room(RoomKind.KING), PaymentMethod.CASH, 99)

        assert "Paid with cash" not in caplog.text
        assert "Payment successful" not in caplog.text
        assert len(registry) == 1
        assert guest.room == room

    def test_result_carries_broadcast_notice(self, service):
        result = book(service, "Ada", "Lovelace", 204)
        assert result.notice == "Room booked with selected features for Ada Lovelace"

    def test_unknown_room_kind_is_a_selection_error(self, service):
        with pytest.raises(RoomSelectionError):
            service.create_room("Penthouse")

    def test_booking_logs_payment(self, service, caplog):
        caplog.set_level(logging.INFO)
        book(service, "Ada", "Lovelace", 204, method=PaymentMethod.CASH, amount=80)

        assert "Paid with cash: $80.00" in caplog.text
        assert "Payment successful for Ada Lovelace" in caplog.text


# ============================================================================
# Tests for get_room_details()
# ============================================================================

class TestRoomDetails:
    """Test suite for room detail lookups."""

    def test_details_list_features_in_applied_order(self, service):
        book(service, "Ada", "Lovelace", 204, features=[Feature.EXTRA_BED, Feature.TV])

        details = service.get_room_details(204)

        assert details["name"] == "Ada"
        assert details["surname"] == "Lovelace"
        assert details["guest_count"] == 1
        assert details["kind"] == "Standard"
        assert details["features"] == ["Extra Bed", "TV"]

    def test_details_without_features(self, service):
        book(service, "Grace", "Hopper", 12, kind=RoomKind.KING, guest_count=3)

        details = service.get_room_details(12)

        assert details["kind"] == "King"
        assert details["guest_count"] == 3
        assert details["features"] == []

    def test_unknown_room_number(self, service):
        book(service, "Ada", "Lovelace", 204)
        assert service.get_room_details(999) is None

    def test_duplicate_room_number_returns_first_booking(self, service):
        book(service, "first", "Guest", 5, features=[Feature.DESK])
        book(service, "second", "Guest", 5, features=[Feature.WIFI])

        details = service.get_room_details(5)

        assert details["name"] == "first"
        assert details["features"] == ["Desk"]
