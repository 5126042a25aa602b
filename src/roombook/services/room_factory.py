from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Dict, List, Optional, Union

from roombook.exceptions import RoomSelectionError
from roombook.models import BaseRoom, Room, RoomKind

logger = logging.getLogger(__name__)

RoomConstructor = Callable[[], Room]


class RoomFactory:
    """
    Keeps the room kind -> constructor mapping in one place.

    New kinds or custom constructors are plugged in through `register`,
    so callers only ever ask for `create_room(kind)`.
    """

    def __init__(self, constructors: Optional[Dict[RoomKind, RoomConstructor]] = None):
        self._constructors: Dict[RoomKind, RoomConstructor] = {}
        for kind in RoomKind:
            self._constructors[kind] = partial(BaseRoom, kind)
        if constructors:
            self._constructors.update(constructors)

    def register(self, kind: RoomKind, constructor: RoomConstructor) -> None:
        """Adds or replaces the constructor used for `kind`."""
        logger.debug(f"Registering constructor for {kind.value} rooms")
        self._constructors[kind] = constructor

    def available_kinds(self) -> List[RoomKind]:
        return [kind for kind in RoomKind if kind in self._constructors]

    def create_room(self, kind: Union[RoomKind, str]) -> Room:
        """Builds a fresh, undecorated room of the requested kind."""
        room_kind = RoomKind.parse(kind)
        constructor = self._constructors.get(room_kind)
        if constructor is None:
            raise RoomSelectionError(f"No constructor registered for {room_kind.value} rooms")

        room = constructor()
        logger.debug(f"Created {room_kind.value} room")
        return room
