from .room import (
    BaseRoom,
    DecoratedRoom,
    Feature,
    Room,
    RoomKind,
    applied_features,
    decorate,
    lookup_choice,
    wrap,
)
from .guest import BookingObserver, GuestRecord

__all__ = [
    "BaseRoom",
    "DecoratedRoom",
    "Feature",
    "Room",
    "RoomKind",
    "applied_features",
    "decorate",
    "lookup_choice",
    "wrap",
    "BookingObserver",
    "GuestRecord",
]
