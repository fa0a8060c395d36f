"""Flappy bird: a bird falls through gaps in pipes scrolling towards it."""

from __future__ import annotations

import argparse
import random

from .brick import GameOver, _play
from .console import Console

FRAME_DELAY = 0.15


class BirdGame:
    """A falling bird that flaps up with Space to pass through pipe gaps."""

    def __init__(self, rng: random.Random | None = None, height: int = 15, width: int = 20):
        self.rng = rng if rng is not None else random.Random()
        self.height = height
        self.width = width
        self.bird_row = 0
        self.bird_col = width // 3
        self.pipe_col = width // 2
        self.gap_top = height // 3
        self.gap_bottom = height // 2
        self.score = 0

    def render(self) -> str:
        rows = []
        for i in range(self.height):
            cells = []
            for j in range(self.width):
                if i == self.bird_row and j == self.bird_col:
                    cells.append("@")
                elif j == self.pipe_col and (i < self.gap_top or i > self.gap_bottom):
                    cells.append("*")
                else:
                    cells.append(" ")
            rows.append("|" + "".join(cells) + "|\n")
        rows.append("-" * (self.width + 2) + "\n")
        rows.append(f"score: {self.score}\n")
        return "".join(rows)

    def tick(self) -> None:
        self.bird_row += 1
        self.pipe_col -= 1
        if self.bird_col == self.pipe_col:
            if self.gap_top <= self.bird_row <= self.gap_bottom:
                self.score += 1
            else:
                raise GameOver()
        if self.pipe_col <= 0:
            self.pipe_col = self.width
            centre = self.rng.randrange(int(self.height * 0.8))
            self.gap_top = centre - self.height // 10
            self.gap_bottom = centre + self.height // 10

    def handle_key(self, key: str | None) -> None:
        if key == " ":
            self.bird_row -= 2


def run(console: Console, rng: random.Random | None = None) -> int:
    """Play until the bird hits a pipe; return the score."""
    return _play(console, BirdGame(rng), FRAME_DELAY, "Game over\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="bird", description="Console flappy bird.")
    parser.add_argument("--seed", type=int, default=None, help="seed for pipe gaps")
    args = parser.parse_args(argv)
    with Console() as console:
        run(console, random.Random(args.seed))
    return 0