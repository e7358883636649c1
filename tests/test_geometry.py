'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Sides, axes, coordinates and the sticker/piece classifier.

'''
import unittest

from twisty.config import PuzzleConfig, validate_shape
from twisty.geometry import (
    Axis,
    Shape,
    Side,
    axis_coords,
    enumerate_all,
    is_piece,
    is_sticker,
    is_valid,
    piece_sides,
    sticker_side,
    sticker_to_piece,
)


class TestSideAxis(unittest.TestCase):

    def test_opposite_is_self_inverse(self):
        for v in range(-10, 10):
            side = Side(v)
            self.assertEqual(side.opposite().opposite(), side)
            self.assertNotEqual(side.opposite(), side)
            self.assertEqual(side.opposite().index, side.index)
            self.assertNotEqual(side.opposite().is_positive(), side.is_positive())

    def test_zero_is_positive_side_of_axis_zero(self):
        self.assertTrue(Side(0).is_positive())
        self.assertEqual(Side(0).into_axis(), Axis(0))
        self.assertEqual(Side(0).opposite(), Side(-1))
        self.assertEqual(Side.negative(0), Side(-1))

    def test_into_axis_rejects_negative_side(self):
        with self.assertRaises(ValueError):
            Side.negative(2).into_axis()
        self.assertEqual(Side.negative(2).axis(), Axis(2))

    def test_out_of_range(self):
        with self.assertRaises(ValueError):
            Side(10)
        with self.assertRaises(ValueError):
            Side(-11)
        with self.assertRaises(ValueError):
            Axis(-1)

    def test_names_and_keys(self):
        self.assertEqual([s.name for s in Side.all(3)], ["R", "U", "F", "L", "D", "B"])
        self.assertEqual(Side.positive(0).key, "f")
        self.assertEqual(Side.negative(0).key, "s")
        self.assertEqual(Axis(1).key, "j")
        self.assertEqual(Side.positive(1).color, (255, 255, 255))
        self.assertEqual(Axis(2).into_side(), Side(2))

    def test_from_key(self):
        self.assertEqual(Side.from_key(3, "f"), Side(0))
        self.assertEqual(Side.from_key(3, "W"), Side.negative(2))
        # 't' is the grip key of axis 3, which a 3D puzzle doesn't have
        self.assertIsNone(Side.from_key(3, "t"))
        self.assertEqual(Side.from_key(4, "t"), Side(3))
        self.assertIsNone(Side.from_key(3, "escape"))
        self.assertEqual(Axis.from_key(3, "l"), Axis(2))
        self.assertIsNone(Axis.from_key(3, "i"))
        self.assertIsNone(Axis.from_key(3, "f"))


class TestShape(unittest.TestCase):

    def test_axis_coords(self):
        self.assertEqual(axis_coords(1), (-1, 0, 1))
        self.assertEqual(axis_coords(2), (-2, -1, 1, 2))
        self.assertEqual(axis_coords(3), (-3, -2, 0, 2, 3))
        self.assertEqual(axis_coords(4), (-4, -3, -1, 1, 3, 4))
        for n in range(1, 20):
            coords = axis_coords(n)
            self.assertEqual(len(coords), n + 2)
            self.assertEqual(list(coords), sorted(-c for c in coords))

    def test_enumeration_counts_333(self):
        shape = Shape((3, 3, 3))
        positions = list(enumerate_all(shape))
        self.assertEqual(len(positions), 81)
        self.assertEqual(len(set(positions)), 81)
        self.assertEqual(sum(1 for _ in shape.stickers()), 54)
        # 26 pieces: the non-central cubies of a 3x3x3 (27 minus the core)
        self.assertEqual(sum(1 for _ in shape.pieces()), 26)

    def test_enumeration_is_deterministic_and_restartable(self):
        shape = Shape((2, 3, 4))
        self.assertEqual(list(shape.positions()), list(shape.positions()))
        self.assertTrue(all(is_valid(shape, pos) for pos in shape.positions()))

    def test_shape_value_semantics(self):
        self.assertEqual(Shape((3, 3, 4)), Shape([3, 3, 4]))
        self.assertEqual(len(Shape((3, 3, 4))), 3)
        self.assertEqual(Shape((3, 3, 4))[2], 4)
        self.assertEqual(Shape((3, 3, 4)).prefix(2), Shape((3, 3)))


class TestClassifier(unittest.TestCase):

    def setUp(self):
        self.shape = Shape((3, 3, 3))

    def test_stickers(self):
        self.assertTrue(is_sticker(self.shape, (3, 0, 0)))
        self.assertEqual(sticker_side(self.shape, (3, 0, 0)), Side.positive(0))
        self.assertTrue(is_sticker(self.shape, (-3, 0, 0)))
        self.assertEqual(sticker_side(self.shape, (-3, 0, 0)), Side.negative(0))
        self.assertEqual(sticker_side(self.shape, (2, -2, 3)), Side.positive(2))

    def test_invalid_positions(self):
        self.assertFalse(is_valid(self.shape, (3, 3, 0)))
        self.assertFalse(is_sticker(self.shape, (3, -3, 0)))
        with self.assertRaises(ValueError):
            sticker_side(self.shape, (2, 0, 0))

    def test_pieces(self):
        self.assertTrue(is_piece(self.shape, (2, 0, 0)))
        self.assertEqual(piece_sides(self.shape, (2, 0, 0)), (Side.positive(0),))
        self.assertEqual(piece_sides(self.shape, (2, 2, 0)), (Side.positive(0), Side.positive(1)))
        self.assertEqual(piece_sides(self.shape, (-2, 2, 0)), (Side.negative(0), Side.positive(1)))
        self.assertFalse(is_piece(self.shape, (0, 0, 0)))
        self.assertFalse(is_piece(self.shape, (3, 0, 0)))

    def test_pieces_on_negative_sides(self):
        self.assertEqual(piece_sides(self.shape, (-2, 0, 0)), (Side.negative(0),))
        self.assertEqual(piece_sides(self.shape, (-2, -2, -2)),
                         (Side.negative(0), Side.negative(1), Side.negative(2)))
        self.assertEqual(piece_sides(self.shape, (2, -2, 0)), (Side.positive(0), Side.negative(1)))
        even = Shape((2, 4, 3))
        self.assertEqual(piece_sides(even, (-1, -3, 0)), (Side.negative(0), Side.negative(1)))

    def test_every_piece_touches_a_side(self):
        for cuts in ((3, 3, 3), (2, 3, 4), (2, 2, 2, 2)):
            shape = Shape(cuts)
            for piece in shape.pieces():
                sides = piece_sides(shape, piece)
                self.assertTrue(sides)
                for side in sides:
                    target = cuts[side.index] - 1
                    self.assertEqual(piece[side.index], target if side.is_positive() else -target)

    def test_piece_without_sides_fails_loudly(self):
        with self.assertRaises(AssertionError):
            piece_sides(self.shape, (0, 0, 0))

    def test_sticker_to_piece(self):
        self.assertEqual(sticker_to_piece(self.shape, (3, 0, 0)), (2, 0, 0))
        self.assertEqual(sticker_to_piece(self.shape, (-3, 2, -2)), (-2, 2, -2))
        for sticker in self.shape.stickers():
            self.assertTrue(is_piece(self.shape, sticker_to_piece(self.shape, sticker)))


class TestValidateShape(unittest.TestCase):

    def test_bounds(self):
        self.assertEqual(validate_shape([3, 3, 4]), (3, 3, 4))
        with self.assertRaises(ValueError):
            validate_shape([])
        with self.assertRaises(ValueError):
            validate_shape([0, 3])
        with self.assertRaises(ValueError):
            validate_shape([20])
        with self.assertRaises(ValueError):
            validate_shape([2] * 11)
        with self.assertRaises(ValueError):
            validate_shape([2.5])

    def test_custom_config(self):
        cfg = PuzzleConfig(max_dim=3, max_layers=5)
        self.assertEqual(validate_shape([5, 5, 5], cfg), (5, 5, 5))
        with self.assertRaises(ValueError):
            validate_shape([6], cfg)
        with self.assertRaises(ValueError):
            validate_shape([2, 2, 2, 2], cfg)


if __name__ == "__main__":
    unittest.main()
