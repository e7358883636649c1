'''
Author: Elia Savino
github: github.com/EliaSavino

Happy Hacking!

Descr: Command line entry point: open the viewer, play in the terminal, or dump a PNG.

'''
#!/usr/bin/env python3
import argparse
import random
import sys

from twisty.config import PuzzleConfig
from twisty.controls.turn_builder import TurnBuilder
from twisty.puzzle import Puzzle
from twisty.turns import UndefinedPlane, describe


def terminal_loop(puzzle: Puzzle, stream=sys.stdin) -> None:
    """
    Line-based play: every character of a line is fed to the turn builder as a key.
    ``escape`` on its own line resets the builder, ``history`` prints the last turns,
    ``q`` quits.
    """
    builder = TurnBuilder(puzzle.shape.cuts, puzzle.config)
    puzzle.print_net(use_color=True)
    for line in stream:
        value = line.strip()
        if value == "q":
            break
        if value == "history":
            print(puzzle.get_history().tail(20).to_string(index=False))
            continue
        keys = [value] if value.lower() in ("escape", "esc") else list(value)
        for key in keys:
            turn = builder.update(key)
            if turn is None:
                continue
            try:
                puzzle.turn(turn)
            except UndefinedPlane as e:
                print(f"  ! dropped {describe(turn)}: {e}")
                continue
            print(f"turn: {describe(turn)}")
        puzzle.print_net(use_color=True)
        print(f"solved: {puzzle.is_solved()} | moves since scramble: {puzzle.moves_since_scramble()}")


def main(argv=None):
    p = argparse.ArgumentParser("Play an N-dimensional cuboid twisty puzzle")
    p.add_argument("--shape", type=int, nargs="+", default=[3, 3, 4],
                   help="layer count per axis, e.g. --shape 3 3 4")
    p.add_argument("--scramble", action="store_true", help="scramble before starting")
    p.add_argument("--scramble-turns", type=int, default=1000, dest="scramble_turns")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--png", type=str, default=None, help="write the net to this image and exit")
    p.add_argument("--terminal", action="store_true", help="play in the terminal instead of a window")
    p.add_argument("--no-history", action="store_false", dest="record_history")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    cfg = PuzzleConfig(
        scramble_turns=args.scramble_turns,
        record_history=args.record_history,
        verbose=args.verbose,
    )
    try:
        puzzle = Puzzle(args.shape, cfg)
    except ValueError as e:
        p.error(str(e))

    if args.scramble:
        puzzle.scramble(rng=random.Random(args.seed))

    if args.png:
        puzzle.render_png(args.png)
        print(f"saved → {args.png}")
        return

    if args.terminal:
        terminal_loop(puzzle)
        return

    from twisty.visualisation.viewer import PuzzleViewer
    PuzzleViewer(puzzle).show()


if __name__ == "__main__":
    main()
