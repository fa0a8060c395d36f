"""Brick breaker: a ball bounced off a paddle into bricks."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass

from .console import KEY_LEFT, KEY_RIGHT, Console

FRAME_DELAY = 0.05
MAX_SIDE_SPEED = 3
PAUSE_PROMPT = "Press any key to continue . . .\n"


class GameOver(Exception):
    """Raised when the player loses the ball (or the bird)."""


@dataclass
class Brick:
    """A brick on the field; hit bricks reappear elsewhere."""

    row: int
    col: int
    active: bool = True


class _PaddleGame:
    """State shared by the paddle games: field, ball, paddle and counters."""

    def __init__(self, rng: random.Random | None, height: int, width: int):
        self.rng = rng if rng is not None else random.Random()
        self.height = height
        self.width = width
        self.ball_row = 0
        self.ball_col = width // 2
        self.v_row = 1
        self.v_col = 1
        self.radius = 6
        self.paddle_center = width // 2
        self.bounces = 0
        self.score = 0

    @property
    def paddle_left(self) -> int:
        return self.paddle_center - self.radius

    @property
    def paddle_right(self) -> int:
        return self.paddle_center + self.radius

    def _cell(self, i: int, j: int) -> str:
        if i == self.ball_row and j == self.ball_col:
            return "o"
        if j == self.width:
            return "|"
        if i == self.height + 1:
            return "-"
        if i == self.height and self.paddle_left <= j <= self.paddle_right:
            return "*"
        return " "

    def _overlay(self, i: int, j: int) -> str | None:
        return None

    def render(self) -> str:
        rows = []
        for i in range(self.height + 2):
            cells = []
            for j in range(self.width + 1):
                over = self._overlay(i, j)
                cells.append(over if over is not None else self._cell(i, j))
            rows.append("".join(cells) + "\n")
        rows.append(f"The number of bouncing balls: {self.bounces}\n")
        rows.append(f"The number of disappearing blocks: {self.score}\n")
        return "".join(rows)


class SingleBlockGame(_PaddleGame):
    """The first version: one block on the top row that jumps when hit."""

    def __init__(self, rng: random.Random | None = None, height: int = 15, width: int = 20):
        super().__init__(rng, height, width)
        self.block_row = 0
        self.block_col = width // 2 + 1

    def _overlay(self, i: int, j: int) -> str | None:
        if (
            i == self.block_row
            and j == self.block_col
            and self._cell(i, j) == " "
        ):
            return "B"
        return None

    def render(self) -> str:
        return super().render()

    def tick(self) -> None:
        if self.ball_row == self.height - 1:
            if self.paddle_left <= self.ball_col < self.paddle_right:
                self.bounces += 1
                self.block_col += self.rng.randrange(4) - 2
            else:
                raise GameOver()
        if self.ball_row == self.block_row and self.ball_col == self.block_col:
            self.score += 1
            self.block_col = self.rng.randrange(self.width)
        self.ball_row += self.v_row
        self.ball_col += self.v_col
        if self.ball_row in (0, self.height - 1):
            self.v_row = -self.v_row
        if self.ball_col in (0, self.width - 1):
            self.v_col = -self.v_col

    def handle_key(self, key: str | None) -> None:
        if key in ("a", KEY_LEFT):
            self.paddle_center -= 1
        elif key in ("d", KEY_RIGHT):
            self.paddle_center += 1


class BrickGame(_PaddleGame):
    """Bricks scattered over the field; the paddle's thirds steer the ball."""

    def __init__(
        self,
        rng: random.Random | None = None,
        height: int = 15,
        width: int = 20,
        brick_count: int = 10,
    ):
        super().__init__(rng, height, width)
        self.bricks = [Brick(*self._brick_position()) for _ in range(brick_count)]

    def _brick_position(self) -> tuple[int, int]:
        row = self.rng.randrange(self.height - 5) + 2
        col = self.rng.randrange(self.width - 2) + 1
        return row, col

    def _overlay(self, i: int, j: int) -> str | None:
        if any(b.active and b.row == i and b.col == j for b in self.bricks):
            return "B"
        return None

    def render(self) -> str:
        return super().render()

    def tick(self) -> None:
        if self.ball_row == self.height:
            left, right = self.paddle_left, self.paddle_right
            if left <= self.ball_col <= right:
                self.bounces += 1
                self.v_row = -self.v_row
                if self.ball_col < left + (right - left) // 3:
                    self.v_col = -2
                elif self.ball_col > left + 2 * (right - left) // 3:
                    self.v_col = 2
                else:
                    self.v_col = 0
            else:
                raise GameOver()
        for brick in self.bricks:
            if brick.active and brick.row == self.ball_row and brick.col == self.ball_col:
                self.score += 1
                brick.row, brick.col = self._brick_position()
                brick.active = True
        self.ball_row += self.v_row
        self.ball_col += self.v_col
        if self.ball_row <= 0:
            self.v_row = -self.v_row
            self.ball_row = 0
        if self.ball_col <= 0 or self.ball_col >= self.width - 1:
            self.v_col = -self.v_col
            self.ball_col = 0 if self.ball_col <= 0 else self.width - 1
        self.v_col = max(-MAX_SIDE_SPEED, min(MAX_SIDE_SPEED, self.v_col))

    def handle_key(self, key: str | None) -> None:
        if key in ("a", KEY_LEFT):
            self.paddle_center = max(self.paddle_center - 1, self.radius)
        elif key in ("d", KEY_RIGHT):
            self.paddle_center = min(self.paddle_center + 1, self.width - 1 - self.radius)
        elif key == "s" and abs(self.v_col) > 0:
            self.v_col -= 1
        elif key == "w" and abs(self.v_col) < MAX_SIDE_SPEED:
            self.v_col += 1


def _wait_for_key(console: Console) -> None:
    while console.read_key() is None:
        console.pause(FRAME_DELAY)


def _play(console: Console, game, delay: float, message: str) -> int:
    """Drive a game until it raises GameOver; return its score."""
    console.clear()
    while True:
        console.home()
        console.write(game.render())
        try:
            game.tick()
        except GameOver:
            console.write(message)
            console.write(PAUSE_PROMPT)
            _wait_for_key(console)
            return game.score
        console.pause(delay)
        key = console.read_key()
        if key is not None:
            game.handle_key(key)


def run(console: Console, rng: random.Random | None = None) -> int:
    """Play the brick game until the ball is lost; return the score."""
    return _play(console, BrickGame(rng), FRAME_DELAY, "Game over.\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="brick", description="Console brick breaker.")
    parser.add_argument("--seed", type=int, default=None, help="seed for brick placement")
    parser.add_argument("--classic", action="store_true", help="play the single-block version")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    with Console() as console:
        if args.classic:
            _play(console, SingleBlockGame(rng), FRAME_DELAY, "Game over.\n")
        else:
            run(console, rng)
    return 0