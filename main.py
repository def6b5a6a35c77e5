#!/usr/bin/env python3
"""
Lumberjack Forest Solver

Computes the shortest walk that chops down every tree in a forest, from
shortest to tallest, and prints the chop sequence.
"""

import argparse
import sys
from typing import List, Optional

from lumberjack.bfs_solver import Solver, SolverConfig
from lumberjack.errors import InvalidInputError
from lumberjack.game.forest_builder import ForestBuilder, ForestConfig
from lumberjack.game.levels import BUILTIN_LEVELS, ForestLevel, get_builtin_level
from lumberjack.game.position import Position
from lumberjack.logger import logger, set_component_level

EXIT_SOLVED = 0
EXIT_NO_SOLUTION = 1
EXIT_INVALID = 2

log = logger.bind(component="cli")


def load_level(args: argparse.Namespace) -> ForestLevel:
    """Pick the level described by the command line arguments."""
    if args.file:
        level = ForestLevel.load_from_file(args.file)
    elif args.random:
        config = ForestConfig(
            depth=args.depth,
            width=args.width,
            num_trees=args.trees,
            max_tree_height=args.max_height,
            num_trenches=args.trenches,
        )
        level = ForestBuilder(config, seed=args.seed).generate_level(
            f"Forest {args.seed}"
        )
    else:
        level = get_builtin_level(args.level)

    if args.start is not None:
        level.start = Position(*args.start)

    errors = level.validate()
    if errors:
        raise InvalidInputError("; ".join(errors))
    return level


def run_solver(level: ForestLevel, config: SolverConfig) -> int:
    """Solve a level and print the result."""
    state = level.create_state()

    print(level)
    print(state.annotate())
    print()

    result = Solver(state, config).run()

    if result.truncated:
        print(f"Search stopped early ({result.limit_reason})")
        return EXIT_INVALID

    if not result.success:
        print("No solution")
        return EXIT_NO_SOLUTION

    print(f"Minimum distance: {result.distance}")
    for i, (pos, dist) in enumerate(result.path.legs()):
        if i == 0:
            print(f"  start at {pos}")
        else:
            height = level.grid.height(pos)
            print(f"  walk {dist:>3} -> chop height {height} at {pos}")
    print(
        f"Explored {result.nodes_explored} nodes, {result.states_seen} states "
        f"in {result.time_taken_ms:.1f}ms"
    )
    return EXIT_SOLVED


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lumberjack Forest Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                        # Solve the grid1 sample forest
  python main.py --level dense          # Solve another sample forest
  python main.py --file forest.json     # Solve a forest saved as JSON
  python main.py --random --seed 42     # Generate and solve a random forest
        """,
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--level",
        choices=BUILTIN_LEVELS,
        default="grid1",
        help="Built-in sample forest to solve",
    )
    source.add_argument("--file", type=str, help="JSON level file to solve")
    source.add_argument(
        "--random", action="store_true", help="Generate a random forest"
    )

    parser.add_argument(
        "--start",
        type=int,
        nargs=2,
        metavar=("ROW", "COL"),
        default=None,
        help="Override the lumberjack's starting position",
    )

    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--depth", type=int, default=5, help="Random forest rows")
    parser.add_argument("--width", type=int, default=5, help="Random forest columns")
    parser.add_argument("--trees", type=int, default=6, help="Random forest trees")
    parser.add_argument(
        "--max-height", type=int, default=4, help="Tallest random tree"
    )
    parser.add_argument(
        "--trenches", type=int, default=3, help="Random forest trenches"
    )

    parser.add_argument("--max-rounds", type=int, default=None, help="Round limit")
    parser.add_argument("--max-states", type=int, default=None, help="State limit")
    parser.add_argument(
        "--timeout-ms", type=float, default=None, help="Search timeout in milliseconds"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log every search round"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_component_level("solver", "DEBUG")
        set_component_level("forest", "DEBUG")

    try:
        level = load_level(args)
        config = SolverConfig(
            max_rounds=args.max_rounds,
            max_states=args.max_states,
            timeout_ms=args.timeout_ms,
        )
    except (InvalidInputError, ValueError, OSError) as e:
        log.error(f"Invalid input: {e}")
        return EXIT_INVALID

    return run_solver(level, config)


if __name__ == "__main__":
    sys.exit(main())
