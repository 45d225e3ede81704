import math
import unittest

from twisty_sim.layouts import CORNERS, FACE_ORDER, corner_position, create_core, rubik_cube, skewb
from twisty_sim.vectors import Vector3


class TestLayouts(unittest.TestCase):
    def test_rubik_sizes(self):
        two = rubik_cube(2)
        self.assertEqual(len(two.blocks), 8)
        self.assertEqual(sorted(a.id for a in two.axes), sorted(FACE_ORDER))

        three = rubik_cube(3)
        self.assertEqual(len(three.blocks), 26)
        self.assertEqual(len(three.get_axis("U").layers), 2)
        self.assertEqual(three.get_axis("U").layers[0].id, "L_U_0")

        with self.assertRaises(ValueError):
            rubik_cube(4)

    def test_corner_positions(self):
        self.assertEqual(sorted(CORNERS), ["DBL", "DBR", "DFL", "DFR", "UBL", "UBR", "UFL", "UFR"])
        self.assertEqual(corner_position("UFL"), Vector3(1.0, -1.0, 1.0))
        self.assertEqual(corner_position("DBR"), Vector3(-1.0, 1.0, -1.0))

    def test_every_face_shows_a_full_side(self):
        for tag, per_face in (("Rubik[2]", 4), ("Rubik[3]", 9), ("Skewb", 5)):
            core = create_core(tag)
            for face_id in FACE_ORDER:
                with self.subTest(tag=tag, face=face_id):
                    self.assertEqual(len(core.get_blocks_for_face(face_id)), per_face)

    def test_create_core_tags(self):
        self.assertEqual(len(create_core("Rubik[2]").blocks), 8)
        self.assertEqual(len(create_core("Skewb").axes), 8)
        for tag in ("Rubik", "Rubik[4]", "Skewb[3]", "Megaminx", ""):
            with self.subTest(tag=tag):
                with self.assertRaises(ValueError):
                    create_core(tag)

    def test_skewb_turn(self):
        core = skewb()
        corner = core.get_block("CUFR")
        moved = core.rotate_around("UFR", 2 * math.pi / 3)
        self.assertEqual(len(moved), 7)
        self.assertTrue(corner.position.is_same_point(corner.initial_position))
        self.assertFalse(corner.orientation.is_identity())

        for block in core.blocks:
            if block not in moved:
                self.assertTrue(block.orientation.is_identity(), msg=block.id)

        core.rotate_around("UFR", 2 * math.pi / 3)
        core.rotate_around("UFR", 2 * math.pi / 3)
        self.assertTrue(all(b.position.is_same_point(b.initial_position) for b in core.blocks))


if __name__ == "__main__":
    unittest.main()
