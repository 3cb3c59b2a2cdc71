from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


DIRECTIONS = ("north", "south", "east", "west")


class RoomEffect(Enum):
    NONE = "none"
    DEATH = "death"
    AMBUSH = "ambush"
    PEACEFUL_END = "peaceful_end"


@dataclass(frozen=True)
class Room:
    room_id: int
    description: str
    exits: Mapping[str, int]
    effect: RoomEffect = RoomEffect.NONE

    def exit_to(self, direction: str) -> int | None:
        return self.exits.get(direction.strip().lower())


@dataclass(frozen=True)
class World:
    start_room: int
    rooms: Mapping[int, Room]

    def get_room(self, room_id: int) -> Room:
        try:
            return self.rooms[room_id]
        except KeyError:
            raise KeyError(f"unknown room {room_id}") from None


def freeze(mapping: dict) -> Mapping:
    return MappingProxyType(dict(mapping))
