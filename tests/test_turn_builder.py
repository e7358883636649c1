'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Key press sequences fed to the turn builder.

'''
import unittest

from twisty.controls.turn_builder import BuilderMode, TurnBuilder
from twisty.geometry import Axis, Side
from twisty.turns import LayerMask, PuzzleTurn, SideTurn


def feed(builder, keys):
    """Feed keys one by one, return every completed turn."""
    out = []
    for key in keys:
        turn = builder.update(key)
        if turn is not None:
            out.append(turn)
    return out


class TestTurnBuilder(unittest.TestCase):

    def setUp(self):
        self.tb = TurnBuilder((3, 3, 3))

    def test_side_turn(self):
        self.assertIsNone(self.tb.update("f"))
        self.assertIsNone(self.tb.update("j"))
        turn = self.tb.update("l")
        self.assertEqual(turn, SideTurn(side=Side(0), from_axis=Axis(1), to_axis=Axis(2)))
        self.assertEqual(turn.layers, LayerMask())

    def test_grip_is_kept_between_turns(self):
        turns = feed(self.tb, "fjllj")
        self.assertEqual(turns, [
            SideTurn(side=Side(0), from_axis=Axis(1), to_axis=Axis(2)),
            SideTurn(side=Side(0), from_axis=Axis(2), to_axis=Axis(1)),
        ])
        self.assertEqual(self.tb.gripped_side, Side(0))

    def test_new_grip_clears_from_axis(self):
        turns = feed(self.tb, "fjskl")
        self.assertEqual(turns, [SideTurn(side=Side.negative(0), from_axis=Axis(0), to_axis=Axis(2))])

    def test_puzzle_turn(self):
        turns = feed(self.tb, "xkj")
        self.assertEqual(turns, [PuzzleTurn(from_axis=Axis(0), to_axis=Axis(1))])
        self.assertIs(self.tb.mode, BuilderMode.PUZZLE)
        self.assertIsNone(self.tb.gripped_side)
        self.assertTrue(self.tb.expects_axis)

    def test_grip_key_leaves_puzzle_mode(self):
        feed(self.tb, "x")
        self.assertIsNone(self.tb.update("e"))
        self.assertIs(self.tb.mode, BuilderMode.SIDE)
        self.assertEqual(self.tb.gripped_side, Side.positive(1))
        self.assertEqual(feed(self.tb, "kl"), [SideTurn(side=Side(1), from_axis=Axis(0), to_axis=Axis(2))])

    def test_digit_leaves_puzzle_mode(self):
        feed(self.tb, "xk")
        self.tb.update("2")
        self.assertIs(self.tb.mode, BuilderMode.SIDE)
        self.assertIsNone(self.tb.grip)
        self.assertIsNone(self.tb.from_axis)
        self.assertEqual(self.tb.layers, LayerMask.of([1, 2]))

    def test_layer_toggles(self):
        turns = feed(self.tb, "23fjl")
        self.assertEqual(turns[0].layers, LayerMask.of([1, 2, 3]))
        turns = feed(self.tb, "1kl")
        self.assertEqual(turns[0].layers, LayerMask.of([2, 3]))

    def test_zero_is_ignored(self):
        feed(self.tb, "0")
        self.assertEqual(self.tb.layers, LayerMask())

    def test_escape_resets(self):
        feed(self.tb, "x")
        self.tb.update("escape")
        self.assertIs(self.tb.mode, BuilderMode.SIDE)
        feed(self.tb, ["f", "2", "j", "Escape"])
        self.assertIsNone(self.tb.grip)
        self.assertIsNone(self.tb.from_axis)
        self.assertEqual(self.tb.layers, LayerMask())
        self.assertFalse(self.tb.expects_axis)

    def test_axis_without_grip_does_nothing(self):
        self.assertEqual(feed(self.tb, "jl"), [])
        self.assertIsNone(self.tb.from_axis)

    def test_keys_outside_the_puzzle_are_ignored(self):
        # 't' grips axis 3 and 'i' names axis 3: neither exists on a 3D puzzle
        self.assertEqual(feed(self.tb, "tjl"), [])
        self.assertEqual(feed(self.tb, "fijl"), [SideTurn(side=Side(0), from_axis=Axis(1), to_axis=Axis(2))])

    def test_unknown_key_keeps_from_axis(self):
        self.assertEqual(feed(self.tb, "fjzl"), [SideTurn(side=Side(0), from_axis=Axis(1), to_axis=Axis(2))])

    def test_builder_does_not_validate_planes(self):
        # degenerate, but still handed to the puzzle, which rejects it
        self.assertEqual(feed(self.tb, "fkk"), [SideTurn(side=Side(0), from_axis=Axis(0), to_axis=Axis(0))])

    def test_uppercase_keys(self):
        self.assertEqual(feed(self.tb, "FJL"), [SideTurn(side=Side(0), from_axis=Axis(1), to_axis=Axis(2))])

    def test_empty_key(self):
        self.assertIsNone(self.tb.update(""))
        self.assertIsNone(self.tb.update(None))

    def test_four_dimensional_keys(self):
        tb = TurnBuilder((3, 3, 3, 3))
        self.assertEqual(feed(tb, "gik"), [SideTurn(side=Side.negative(3), from_axis=Axis(3), to_axis=Axis(0))])


if __name__ == "__main__":
    unittest.main()
