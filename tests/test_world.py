import copy
import unittest

from fellmore.world.content import WORLD_DATA
from fellmore.world.loader import build_world, load_world, validate_world
from fellmore.world.models import RoomEffect


class WorldTests(unittest.TestCase):
    def test_fixed_rooms(self):
        world = load_world()
        self.assertEqual(world.start_room, 1)
        self.assertEqual(sorted(world.rooms), [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 16])

        effects = {room_id: room.effect for room_id, room in world.rooms.items() if room.effect is not RoomEffect.NONE}
        self.assertEqual(
            effects,
            {
                6: RoomEffect.DEATH,
                8: RoomEffect.DEATH,
                11: RoomEffect.AMBUSH,
                13: RoomEffect.PEACEFUL_END,
            },
        )

    def test_exits_point_at_existing_rooms(self):
        world = load_world()
        for room in world.rooms.values():
            for target in room.exits.values():
                self.assertIn(target, world.rooms)

    def test_every_room_reachable_from_start(self):
        world = load_world()
        seen = {world.start_room}
        frontier = [world.start_room]
        while frontier:
            room = world.get_room(frontier.pop())
            for target in room.exits.values():
                if target not in seen:
                    seen.add(target)
                    frontier.append(target)
        self.assertEqual(seen, set(world.rooms))

    def test_exit_lookup_ignores_case(self):
        room = load_world().get_room(3)
        self.assertEqual(room.exit_to("NORTH"), 6)
        self.assertEqual(room.exit_to(" West "), 4)
        self.assertIsNone(room.exit_to("up"))

    def test_unknown_room_raises(self):
        world = load_world()
        with self.assertRaises(KeyError):
            world.get_room(14)

    def test_world_is_read_only(self):
        world = load_world()
        with self.assertRaises(TypeError):
            world.rooms[14] = world.get_room(1)
        with self.assertRaises(TypeError):
            world.get_room(7).exits["west"] = 10

    def test_mixed_case_directions_are_normalised(self):
        data = {"start_room": 1, "rooms": {1: {"exits": {"North": 2}}, 2: {"exits": {}}}}
        world = build_world(data)
        self.assertEqual(dict(world.get_room(1).exits), {"north": 2})

    def test_validation_errors(self):
        # start_room missing
        bad = copy.deepcopy(WORLD_DATA)
        bad["start_room"] = 99
        with self.assertRaises(ValueError):
            validate_world(bad)

        # bad exit target
        bad = copy.deepcopy(WORLD_DATA)
        bad["rooms"][1]["exits"]["north"] = 14
        with self.assertRaises(ValueError):
            validate_world(bad)

        # bad direction
        bad = copy.deepcopy(WORLD_DATA)
        bad["rooms"][1]["exits"]["up"] = 2
        with self.assertRaises(ValueError):
            validate_world(bad)

        # same direction twice, differing only by case
        bad = copy.deepcopy(WORLD_DATA)
        bad["rooms"][1]["exits"]["North"] = 2
        with self.assertRaises(ValueError):
            validate_world(bad)

        # unknown effect
        bad = copy.deepcopy(WORLD_DATA)
        bad["rooms"][2]["effect"] = "teleport"
        with self.assertRaises(ValueError):
            validate_world(bad)

        # non-positive id
        bad = copy.deepcopy(WORLD_DATA)
        bad["rooms"][0] = {"exits": {}}
        with self.assertRaises(ValueError):
            validate_world(bad)

        # mismatched id
        bad = copy.deepcopy(WORLD_DATA)
        bad["rooms"][2]["id"] = 3
        with self.assertRaises(ValueError):
            validate_world(bad)


if __name__ == "__main__":
    unittest.main()
