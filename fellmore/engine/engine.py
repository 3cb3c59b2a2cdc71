from __future__ import annotations

from typing import Any, Callable

from fellmore.engine.render import COMMAND_SUMMARY, render_description, render_inventory, render_room
from fellmore.engine.state import GameState
from fellmore.world.models import DIRECTIONS, Room, RoomEffect, World


FORGE_ROOM = 4
ALLEY_ROOM = 5
GATE_ROOM = 7
GATE_DIRECTION = "west"

KEY = "rusted iron key"
SWORD = "shortsword"
GOLD = "sack of gold"

AMBUSH_OPENING = ["", "Brush parts - A GOBLIN LURCHES FROM THE DARK!"]
AMBUSH_VICTORY = [
    "Your hand moves on instinct; you draw the shortsword.",
    "Steel bites. The goblin hisses, staggers, and falls.",
    "Its crude knife skitters across the stones.",
    "The night is still again. The way north stands open.",
]
AMBUSH_DEATH = [
    "You reach for a weapon - there is none.",
    "The goblin crashes into you; a jagged blade flashes.",
    "Cold earth. Dimming stars. Silence.",
    "YOU ARE DEAD.",
]

RESTART_PROMPT = "Restart? (y/n): "
RESTART_REMINDER = "Type 'quit' to exit, or keep exploring from the start."


class Engine:
    """Interprets player commands against a world and a mutable game state.

    All text goes through ``write``; all input (commands and the restart
    question) comes from ``ask``, which may raise ``EOFError`` when input runs
    out. ``audit`` receives one dict per notable event.
    """

    def __init__(
        self,
        world: World,
        write: Callable[[str], None],
        ask: Callable[[str], str],
        audit: Callable[[dict[str, Any]], None] | None = None,
        prompt: str = "> ",
    ):
        self.world = world
        self.write = write
        self.ask = ask
        self.audit = audit or (lambda event: None)
        self.prompt = prompt

    def new_game(self, state: GameState) -> None:
        state.reset(self.world.start_room)
        self.write(render_room(self.world, state))

    def run(self, state: GameState | None = None) -> GameState:
        state = state if state is not None else GameState()
        self.audit({"event": "game_start"})
        self.new_game(state)
        while state.running:
            try:
                raw = self.ask(self.prompt)
            except EOFError:
                raw = "quit"
            self.handle_command(state, raw)
        return state

    def handle_command(self, state: GameState, raw: str) -> None:
        cmd = raw.strip()
        if not cmd:
            return
        lower = cmd.lower()

        if lower in DIRECTIONS:
            self.attempt_move(state, lower)
            return

        if lower == "quit":
            state.running = False
            self.audit({"event": "quit", "room": state.current_room})
            return

        if lower == "look":
            self.write(render_room(self.world, state))
            return

        if lower in {"inventory", "inv"}:
            self.write(render_inventory(state))
            return

        if lower.startswith("pick up "):
            self.pick_up(state, cmd[len("pick up "):].strip())
            return

        if lower.startswith("use "):
            self.use_item(state, cmd[len("use "):].strip())
            return

        if lower.startswith("buy "):
            self.buy_item(state, cmd[len("buy "):].strip())
            return

        self.write("Unknown command.")
        self.write(COMMAND_SUMMARY)

    def attempt_move(self, state: GameState, direction: str) -> None:
        direction = direction.strip().lower()
        current = self.world.get_room(state.current_room)

        # The locked gate overrides the exit table rather than being a missing edge.
        if current.room_id == GATE_ROOM and direction == GATE_DIRECTION and not state.gate_unlocked:
            self.write("The great iron gate is locked.")
            return

        target = current.exit_to(direction)
        if target is None:
            self.write("That's not a direction you can go.")
            return

        state.current_room = target
        self.audit({"event": "move", "from": current.room_id, "to": target, "direction": direction})
        room = self.world.get_room(target)

        if self._enter(state, room):
            self.write(render_room(self.world, state))
            return

        self.write(render_description(room))
        if state.life_over:
            self.prompt_restart(state)

    def _enter(self, state: GameState, room: Room) -> bool:
        """Apply the room's on-enter effect; False suppresses the normal room print."""
        if room.effect is RoomEffect.DEATH:
            state.alive = False
            self.audit({"event": "death", "room": room.room_id})
            return False

        if room.effect is RoomEffect.PEACEFUL_END:
            state.ended_peacefully = True
            self.audit({"event": "peaceful_end", "room": room.room_id})
            return False

        if room.effect is RoomEffect.AMBUSH:
            return self._ambush(state, room)

        return True

    def _ambush(self, state: GameState, room: Room) -> bool:
        if state.ambush_cleared:
            return True

        self.write("\n".join(AMBUSH_OPENING))
        if state.has_item(SWORD):
            self.write("\n".join(AMBUSH_VICTORY))
            state.ambush_cleared = True
            return True

        self.write("\n".join(AMBUSH_DEATH))
        state.alive = False
        self.audit({"event": "death", "room": room.room_id})
        return False

    def pick_up(self, state: GameState, phrase: str) -> None:
        if not phrase:
            self.write("Pick up what?")
            return

        item = phrase.lower()
        wants_key = "key" in item or item in {"rusted iron key", "iron key"}
        if state.current_room == ALLEY_ROOM and state.key_in_alley and wants_key:
            state.key_in_alley = False
            state.add_item(KEY)
            self.write("You picked up the rusted iron key.")
            return

        self.write("There's nothing like that to pick up here.")

    def use_item(self, state: GameState, phrase: str) -> None:
        if not phrase:
            self.write("Use what?")
            return
        if "key" in phrase.lower():
            self._use_key(state)
            return
        self.write("You can't use that right now.")

    def _use_key(self, state: GameState) -> None:
        if not state.has_item(KEY):
            self.write("You don't have a key.")
            return
        if state.current_room != GATE_ROOM:
            self.write("There's nothing here that the key fits.")
            return
        if state.gate_unlocked:
            self.write("The gate is already unlocked.")
            return
        state.gate_unlocked = True
        self.write("Metal clinks; the mechanism yields. The gate is now unlocked to the west.")

    def buy_item(self, state: GameState, phrase: str) -> None:
        if not phrase:
            self.write("Buy what?")
            return
        if "sword" in phrase.lower():
            self._buy_sword(state)
            return
        self.write("The blacksmith doesn't sell that.")

    def _buy_sword(self, state: GameState) -> None:
        if state.current_room != FORGE_ROOM:
            self.write("There's no smith here to sell you a sword.")
            return
        if state.has_item(SWORD):
            self.write("You already have a shortsword.")
            return
        if not state.has_item(GOLD):
            self.write("You don't have anything to pay with.")
            return
        state.remove_item(GOLD)
        state.add_item(SWORD)
        self.write("You purchase a shortsword, handing over your sack of gold.")

    def prompt_restart(self, state: GameState) -> None:
        self.write("")
        try:
            answer = self.ask(RESTART_PROMPT).strip().lower()
        except EOFError:
            answer = ""

        # Every answer restarts; only y/yes skips the reminder.
        if answer not in {"y", "yes"}:
            self.write(RESTART_REMINDER)
        self.audit({"event": "restart", "answer": answer})
        self.new_game(state)
