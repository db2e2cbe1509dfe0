"""
Interactive maze demo.
Display a generated maze, walk it with the keyboard, regenerate on demand.
"""

import logging
import random
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render
from maze import Maze, new_maze


class InteractiveDemo:
    """Keyboard-driven maze viewer."""

    MOVES = {
        'w': (0, -1),
        's': (0, 1),
        'a': (-1, 0),
        'd': (1, 0),
    }

    def __init__(self, width: int, height: int, seed: int) -> None:
        self.width = width
        self.height = height
        self.seed = seed
        self.maze: Maze = new_maze(width, height)
        self.position = (0, 0)
        self.console = Console()
        self.status_message = "Ready"
        self.regenerate()

    def regenerate(self) -> None:
        """Rebuild the maze from the current seed."""
        self.maze.generate(random.Random(self.seed))
        self.position = (0, 0)
        self.status_message = f"Generated with seed {self.seed}"

    def generate_display(self) -> Panel:
        """Generate the current display with maze and status."""
        status = Text()
        status.append("Maze: ", style="bold")
        status.append(f"{self.width} x {self.height}, seed {self.seed}, {self.maze.link_count()} links\n")
        status.append("Position: ", style="bold")
        status.append(f"{self.position}\n\n")

        maze_text = render(self.maze, colour=True, highlight=self.position)
        status.append(Text.from_ansi(maze_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  W/A/S/D - Walk through a passage\n")
        status.append("  N - New maze (next seed)\n")
        status.append("  R - Regenerate with the same seed\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Maze Demo", border_style="green")

    def attempt_move(self, dx: int, dy: int) -> None:
        """Move the marker if a passage leads that way."""
        x, y = self.position
        nx, ny = x + dx, y + dy
        if not (0 <= nx < self.width and 0 <= ny < self.height):
            self.status_message = "✗ Edge of the maze"
            return
        if self.maze.cell_at(nx, ny) not in self.maze.links_at(x, y):
            self.status_message = "✗ Wall"
            return
        self.position = (nx, ny)
        self.status_message = f"✓ Moved to {self.position}"

    def run(self) -> None:
        """Run the interactive demo."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey().lower()

                    if key == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key == 'r':
                        self.regenerate()
                    elif key == 'n':
                        self.seed += 1
                        self.regenerate()
                    elif key in self.MOVES:
                        self.attempt_move(*self.MOVES[key])
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')

    args = [int(a) for a in sys.argv[1:4]]
    width, height, seed = args + [8, 6, 0][len(args):]
    InteractiveDemo(width, height, seed).run()
