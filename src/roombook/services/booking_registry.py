from __future__ import annotations

import logging
from threading import Lock
from typing import List, Optional, Tuple

from roombook.models import BookingObserver

logger = logging.getLogger(__name__)


class BookingRegistry:
    """
    Holds every registered booking holder, in registration order.

    Room numbers are not unique keys: the same number may be registered more than
    once and lookups return the earliest registration.
    """

    def __init__(self):
        self._holders: List[BookingObserver] = []
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._holders)

    @property
    def holders(self) -> Tuple[BookingObserver, ...]:
        with self._lock:
            return tuple(self._holders)

    def register(self, holder: BookingObserver) -> None:
        """Appends `holder`; registering the same holder twice adds two entries."""
        on_registered = getattr(holder, "on_registered", None)
        if on_registered is not None:
            on_registered()
        with self._lock:
            self._holders.append(holder)
        logger.info(f"Registered holder for room {holder.room_number}")

    def broadcast(self, message: str) -> None:
        """Delivers `message` once to every currently registered holder."""
        with self._lock:
            snapshot = list(self._holders)

        logger.debug(f"Broadcasting to {len(snapshot)} holder(s): {message}")
        for holder in snapshot:
            holder.update(message)

    def find_by_room_number(self, room_number: int) -> Optional[BookingObserver]:
        with self._lock:
            for holder in self._holders:
                if holder.room_number == room_number:
                    return holder
        return None
