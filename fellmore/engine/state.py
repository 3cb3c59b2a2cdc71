from __future__ import annotations

from dataclasses import dataclass, field


START_ROOM = 1
STARTING_INVENTORY = ("sack of gold",)


@dataclass
class GameState:
    current_room: int = START_ROOM
    running: bool = True
    alive: bool = True
    ended_peacefully: bool = False
    gate_unlocked: bool = False
    key_in_alley: bool = True
    ambush_cleared: bool = False
    inventory: list[str] = field(default_factory=list)

    def reset(self, start_room: int = START_ROOM) -> None:
        """Put the player back at the start with a fresh life and starting kit."""
        self.current_room = start_room
        self.running = True
        self.alive = True
        self.ended_peacefully = False
        self.gate_unlocked = False
        self.key_in_alley = True
        self.ambush_cleared = False
        self.inventory.clear()
        self.inventory.extend(STARTING_INVENTORY)

    def has_item(self, name: str) -> bool:
        wanted = name.lower()
        return any(item.lower() == wanted for item in self.inventory)

    def add_item(self, name: str) -> bool:
        if self.has_item(name):
            return False
        self.inventory.append(name)
        return True

    def remove_item(self, name: str) -> bool:
        wanted = name.lower()
        for i, item in enumerate(self.inventory):
            if item.lower() == wanted:
                del self.inventory[i]
                return True
        return False

    @property
    def life_over(self) -> bool:
        return not self.alive or self.ended_peacefully
