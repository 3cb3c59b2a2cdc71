from __future__ import annotations

from fellmore.engine.state import GameState
from fellmore.world.models import Room, RoomEffect, World


COMMAND_SUMMARY = "Try: north/south/east/west, inventory, pick up <item>, use <item>, buy <item>, look, quit."
FALLEN_GOBLIN = "A fallen goblin lies in the brush. The way north stands open."


def render_room(world: World, state: GameState) -> str:
    room = world.get_room(state.current_room)
    lines: list[str] = ["", room.description]
    if room.effect is RoomEffect.AMBUSH and state.ambush_cleared:
        lines.append(FALLEN_GOBLIN)
    return "\n".join(lines)


def render_description(room: Room) -> str:
    return "\n" + room.description


def render_inventory(state: GameState) -> str:
    if not state.inventory:
        return "Inventory is empty."
    lines = ["Inventory:"]
    lines.extend(f"- {item}" for item in state.inventory)
    return "\n".join(lines)
