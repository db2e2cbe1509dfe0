"""
Demonstration script for the maze generator.

    python demo.py                  # a few sample mazes
    python demo.py 8 5 42           # one 8x5 maze with seed 42, with trace
"""

import logging
import random
import sys

from ascii_render import print_maze, render
from maze import new_maze


def demo() -> None:
    """Print a handful of mazes, including the degenerate corridors."""
    for width, height, seed in [(6, 4, 1), (1, 4, 2), (5, 1, 3), (10, 6, 2024)]:
        print("=" * 40)
        print(f"{width} x {height} maze, seed {seed}:")
        print("=" * 40)
        maze = new_maze(width, height).generate(random.Random(seed))
        print(render(maze, colour=True))
        print(f"{maze.link_count()} links for {width * height} cells")
        print()


def trace_demo(width: int, height: int, seed: int) -> None:
    """Generate one maze with every step written to stdout."""
    maze = new_maze(width, height, log=print)
    maze.generate(random.Random(seed))
    print()
    print_maze(maze)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    if len(sys.argv) > 1:
        args = [int(a) for a in sys.argv[1:4]]
        width, height, seed = args + [6, 4, 0][len(args):]
        trace_demo(width, height, seed)
    else:
        demo()
