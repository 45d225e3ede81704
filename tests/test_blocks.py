import math
import unittest

from twisty_sim.blocks import Block, BlockFace
from twisty_sim.vectors import X_AXIS, Y_AXIS, Z_AXIS, ZERO, SphericalVector, Vector3


def _corner():
    return Block(
        "CUFR",
        Vector3(1.0, 1.0, 1.0),
        [BlockFace("U", Z_AXIS), BlockFace("F", X_AXIS), BlockFace("R", Y_AXIS)],
    )


class TestBlock(unittest.TestCase):
    def test_invalid_construction(self):
        with self.assertRaises(ValueError):
            Block("", X_AXIS, [BlockFace("F", X_AXIS)])
        with self.assertRaises(ValueError):
            Block("   ", X_AXIS, [BlockFace("F", X_AXIS)])
        with self.assertRaises(ValueError):
            Block("B1", X_AXIS, [])
        with self.assertRaises(ValueError):
            Block("B1", X_AXIS, [None])
        with self.assertRaises(ValueError):
            BlockFace("F", ZERO)
        with self.assertRaises(ValueError):
            BlockFace("", X_AXIS)

    def test_faces_are_sorted_and_none_skipped(self):
        block = Block("B1", X_AXIS, [BlockFace("R", Y_AXIS), None, BlockFace("F", X_AXIS)])
        self.assertEqual([f.id for f in block.faces], ["F", "R"])

    def test_face_from_spherical_direction(self):
        face = BlockFace("R", SphericalVector.from_degrees(90.0, 90.0))
        self.assertTrue(face.position.is_same_point(Y_AXIS))
        self.assertEqual(face.spherical, SphericalVector(math.pi / 2, math.pi / 2))

    def test_initial_state(self):
        block = _corner()
        self.assertTrue(block.orientation.is_identity())
        self.assertTrue(block.position.is_same_point(Vector3(1.0, 1.0, 1.0)))
        self.assertEqual(block.get_block_face(Z_AXIS).id, "U")
        self.assertEqual(block.get_block_face(Z_AXIS * 5.0).id, "U")
        self.assertIsNone(block.get_block_face(-Z_AXIS))
        self.assertEqual(block.get_block_face_by_id("F").position, X_AXIS)
        self.assertIsNone(block.get_block_face_by_id("D"))

    def test_rotation_moves_position_and_faces(self):
        block = _corner()
        block.rotate_around(Z_AXIS, math.pi / 2)
        self.assertTrue(block.position.is_same_point(Vector3(1.0, -1.0, 1.0)))
        self.assertEqual(block.get_block_face(-Y_AXIS).id, "F")
        self.assertEqual(block.get_block_face(X_AXIS).id, "R")
        self.assertEqual(block.get_block_face(Z_AXIS).id, "U")
        self.assertEqual(block.get_block_face(SphericalVector(0.0, 0.0)).id, "U")
        self.assertIsNone(block.get_block_face(Y_AXIS))

    def test_rotations_are_composed_in_world_frame(self):
        block = _corner()
        block.rotate_around(X_AXIS, math.pi / 2)
        block.rotate_around(Z_AXIS, math.pi / 2)
        expected = Vector3(1.0, 1.0, 1.0).rotate_around_vector(X_AXIS, -math.pi / 2).rotate_around_vector(Z_AXIS, -math.pi / 2)
        self.assertTrue(block.position.is_same_point(expected))

    def test_full_turns_resolve_original_faces(self):
        sequences = [
            (X_AXIS, [math.pi / 2] * 4),
            (Y_AXIS, [math.pi / 3, 2 * math.pi / 3, math.pi]),
            (Vector3(1.0, 1.0, 1.0), [2 * math.pi / 3] * 3),
            (Vector3(-0.2, 0.9, 0.4), [0.7, 1.9, 2 * math.pi - 2.6]),
        ]
        block = _corner()
        for repeat in range(5):
            for axis, angles in sequences:
                for theta in angles:
                    block.rotate_around(axis, theta)
                for face in block.faces:
                    with self.subTest(repeat=repeat, axis=axis, face=face.id):
                        self.assertIs(block.get_block_face(face.position), face)
        self.assertTrue(block.position.is_same_point(block.initial_position))

    def test_reset(self):
        block = _corner()
        block.rotate_around(Y_AXIS, 1.0)
        block.reset()
        self.assertTrue(block.orientation.is_identity())


if __name__ == "__main__":
    unittest.main()
