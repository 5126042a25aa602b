from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from roombook.exceptions import BookingError
from roombook.models.room import Room, applied_features

logger = logging.getLogger(__name__)


@runtime_checkable
class BookingObserver(Protocol):
    """
    Anything the booking registry can hold and notify.

    Holders may also define an optional `on_registered()` hook, called once per
    registration before the holder is added.
    """

    room_number: int

    def update(self, message: str) -> None: ...


@dataclass
class GuestRecord:
    """Guest holding one booked room."""

    # Required fields
    name: str
    surname: str
    guest_count: int
    room_number: int

    # Optional fields
    room: Optional[Room] = field(default=None)
    notifications: List[str] = field(default_factory=list)
    registered: bool = field(default=False)

    # ------------------------------------
    # Methods
    # ------------------------------------

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}"

    def __setattr__(self, name: str, value: Any) -> None:
        # the held room is fixed once the record is registered
        if name == "room" and getattr(self, "registered", False):
            raise BookingError(f"Room {self.room_number} is already registered for {self.full_name}")
        super().__setattr__(name, value)

    def attach_room(self, room: Room) -> None:
        """Replaces the held room. Only allowed before registration."""
        self.room = room

    def on_registered(self) -> None:
        self.registered = True

    def update(self, message: str) -> None:
        note = f"Customer {self.name} {self.surname} with no {self.guest_count}: {message}"
        self.notifications.append(note)
        logger.info(note)

    def features(self) -> List[str]:
        """Features of the held room in the order they were applied."""
        if self.room is None:
            return []
        return applied_features(self.room)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "surname": self.surname,
            "guest_count": self.guest_count,
            "room_number": self.room_number,
            "kind": self.room.kind_label if self.room is not None else None,
            "features": self.features(),
        }
