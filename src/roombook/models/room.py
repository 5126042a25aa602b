from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Type, TypeVar, Union

from roombook.exceptions import RoomSelectionError

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def _normalize(text: str) -> str:
    return re.sub(r"[\s_\-]", "", text).lower()


def lookup_choice(enum_cls: Type[E], value: object) -> Optional[E]:
    """
    Resolves a menu selection to an enum member.

    Accepts the member itself, its label ("Extra Bed") or its name ("EXTRA_BED"),
    ignoring case, spaces, underscores and hyphens. Returns None when nothing matches.
    """
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None

    key = _normalize(value)
    for member in enum_cls:
        if key in (_normalize(member.value), _normalize(member.name)):
            return member
    return None


class RoomKind(Enum):
    """Bookable room variants, in catalog order."""

    ECONOMY = "Economy"
    STANDARD = "Standard"
    SUITE = "Suite"
    KING = "King"

    @classmethod
    def parse(cls, value: object) -> RoomKind:
        kind = lookup_choice(cls, value)
        if kind is None:
            raise RoomSelectionError(f"Unknown room kind: {value!r}")
        return kind


class Feature(Enum):
    """Add-on features that can be stacked on top of a room."""

    EXTRA_BED = "Extra Bed"
    DESK = "Desk"
    TV = "TV"
    WIFI = "WiFi"

    @classmethod
    def parse(cls, value: object) -> Feature:
        feature = lookup_choice(cls, value)
        if feature is None:
            raise RoomSelectionError(f"Unknown room feature: {value!r}")
        return feature


# ------------------------------------
# Room variants
# ------------------------------------

@dataclass(frozen=True)
class BaseRoom:
    """An undecorated room of a single kind."""

    kind: RoomKind

    @property
    def kind_label(self) -> str:
        return self.kind.value

    def book(self) -> List[str]:
        """Finalizes the booking and returns the emitted effect messages."""
        message = f"{self.kind.value} room booked."
        logger.info(message)
        return [message]

    def collect_features(self) -> List[str]:
        return []


@dataclass(frozen=True)
class DecoratedRoom:
    """
    A room wrapped with exactly one feature.

    The wrapped room is owned by the decoration, so decorations nest arbitrarily:
    DecoratedRoom(TV, DecoratedRoom(EXTRA_BED, BaseRoom(STANDARD))).
    """

    feature: Feature
    inner: Room

    @property
    def kind(self) -> RoomKind:
        return self.inner.kind

    @property
    def kind_label(self) -> str:
        return self.inner.kind_label

    def book(self) -> List[str]:
        """Finalizes the wrapped room first, then applies this feature."""
        effects = self.inner.book()
        message = f"{self.feature.value} added to the room."
        logger.info(message)
        effects.append(message)
        return effects

    def collect_features(self) -> List[str]:
        """Feature labels from the outermost decoration inward (last applied first)."""
        return [self.feature.value] + self.inner.collect_features()


Room = Union[BaseRoom, DecoratedRoom]


# ------------------------------------
# Decoration helpers
# ------------------------------------

def wrap(feature: Union[Feature, str], room: Room) -> Room:
    """Adds one feature on top of `room`."""
    return DecoratedRoom(feature=Feature.parse(feature), inner=room)


def decorate(room: Room, features: Iterable[Union[Feature, str]]) -> Room:
    """Applies `features` in order; the last one ends up outermost."""
    for feature in features:
        room = wrap(feature, room)
    return room


def applied_features(room: Room) -> List[str]:
    """Feature labels in the order they were applied (first applied first)."""
    return list(reversed(room.collect_features()))
