from __future__ import annotations

from typing import Any

from fellmore.world.content import WORLD_DATA
from fellmore.world.models import DIRECTIONS, Room, RoomEffect, World, freeze


VALID_EFFECTS = {effect.value for effect in RoomEffect}


def validate_world(world_data: dict[str, Any]) -> None:
    rooms = world_data.get("rooms", {})

    start_room = world_data.get("start_room")
    if start_room not in rooms:
        raise ValueError("start_room does not exist")

    for room_id, room in rooms.items():
        if not isinstance(room_id, int) or room_id < 1:
            raise ValueError(f"room id {room_id!r} must be a positive integer")
        if room.get("id", room_id) != room_id:
            raise ValueError(f"room {room_id} declares mismatched id {room.get('id')}")

        seen_directions: set[str] = set()
        for direction, target in room.get("exits", {}).items():
            if str(direction).lower() not in DIRECTIONS:
                raise ValueError(f"invalid exit direction {direction} in room {room_id}")
            if str(direction).lower() in seen_directions:
                raise ValueError(f"duplicate exit direction {direction} in room {room_id}")
            seen_directions.add(str(direction).lower())
            if target not in rooms:
                raise ValueError(f"exit {direction} in room {room_id} points to unknown room {target}")

        effect = room.get("effect", RoomEffect.NONE.value)
        if effect not in VALID_EFFECTS:
            raise ValueError(f"unknown effect {effect} in room {room_id}")


def build_world(world_data: dict[str, Any]) -> World:
    validate_world(world_data)

    rooms: dict[int, Room] = {}
    for room_id, room in world_data["rooms"].items():
        exits = {str(direction).lower(): target for direction, target in room.get("exits", {}).items()}
        rooms[room_id] = Room(
            room_id=room_id,
            description=room.get("description", ""),
            exits=freeze(exits),
            effect=RoomEffect(room.get("effect", RoomEffect.NONE.value)),
        )

    return World(start_room=world_data["start_room"], rooms=freeze(rooms))


def load_world() -> World:
    return build_world(WORLD_DATA)
