from __future__ import annotations

from typing import Any


# Room ids 14 and 15 are unallocated.
WORLD_DATA: dict[str, Any] = {
    "start_room": 1,
    "rooms": {
        1: {
            "description": (
                "You are in The Rusty Mug, a smoky tavern filled with noise and the smell of ale. "
                "The barkeep eyes you suspiciously as drunks argue nearby.\n"
                "Exits: NORTH - to the village square. SOUTH - to your room."
            ),
            "exits": {"north": 3, "south": 2},
        },
        2: {
            "description": (
                "A small, dimly lit room with a straw bed and a candle burning low. "
                "Your pack rests on a chair.\n"
                "Exits: NORTH - back to the tavern."
            ),
            "exits": {"north": 1},
        },
        3: {
            "description": (
                "You stand in the busy heart of the village. Merchants shout prices, "
                "and horses clatter across cobblestones.\n"
                "Exits: NORTH - to the bridge. EAST - to a narrow alley. SOUTH - to the tavern. "
                "WEST - to the blacksmith's forge."
            ),
            "exits": {"north": 6, "east": 5, "south": 1, "west": 4},
        },
        4: {
            "description": (
                "You stand before a roaring forge. The blacksmith hammers steel with practiced rhythm.\n"
                "Exits: EAST - to the square. WEST - to the forest trail. NORTH - to the storage shed.\n"
                "A sword rests on a rack. Perhaps he'll part with it for a price."
            ),
            "exits": {"east": 3, "west": 7, "north": 16},
        },
        5: {
            "description": (
                "The alley is damp and silent. Trash piles against the walls, "
                "and rats scurry in the shadows.\n"
                "Exits: WEST - to the square.\n"
                "A rusted iron key lies half-buried in mud."
            ),
            "exits": {"west": 3},
        },
        6: {
            "description": (
                "You walk north from the square and reach an ancient bridge. "
                "A massive troll stirs beneath it.\n"
                "YOU ARE DEAD."
            ),
            "exits": {},
            "effect": "death",
        },
        7: {
            "description": (
                "The path twists through tall trees. Ahead, a great iron gate bars the way.\n"
                "Exits: EAST - to the blacksmith. WEST - to the gate (locked). "
                "SOUTH - back toward the village."
            ),
            "exits": {"east": 4, "west": 9, "south": 3},
        },
        8: {
            "description": (
                "You find a ruined tower and a single chest. It trembles...\n"
                "The lid snaps shut with teeth. YOU ARE DEAD."
            ),
            "exits": {},
            "effect": "death",
        },
        9: {
            "description": (
                "The towering gate looms before you.\n"
                "Exits: EAST - to the forest trail. WEST - to the clearing."
            ),
            "exits": {"east": 7, "west": 10},
        },
        10: {
            "description": "You stand in a moonlit clearing. Exits: EAST - to the gate. NORTH - along a winding trail.",
            "exits": {"east": 9, "north": 11},
        },
        11: {
            "description": "The path narrows as it climbs toward the summit.",
            "exits": {"south": 10, "north": 12},
            "effect": "ambush",
        },
        12: {
            "description": (
                "The rocky path climbs steeply. "
                "Exits: NORTH - to the hill summit. SOUTH - back to the narrow trail."
            ),
            "exits": {"south": 11, "north": 13},
        },
        13: {
            "description": (
                "You climb to the top of the hill. The stars burn bright above.\n"
                "This is the end of your adventure."
            ),
            "exits": {},
            "effect": "peaceful_end",
        },
        16: {
            "description": (
                "A rickety shed filled with dust and cobwebs.\n"
                "Exits: SOUTH - back to the forge. EAST - through a collapsed wall toward old ruins."
            ),
            "exits": {"south": 4, "east": 8},
        },
    },
}
