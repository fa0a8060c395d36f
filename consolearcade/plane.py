"""Plane shooter: an early single-target laser game and the scrolling shooter."""

from __future__ import annotations

import argparse
import random

from .console import ESCAPE, Console

FRAME_DELAY = 0.02
LASER_FRAME_DELAY = 0.05
ENEMY_PERIOD = 10
MAX_BULLET_SPEED = 5


def score_banner(score: int, wide: bool = False) -> str:
    """The framed score shown under or above the playfield."""
    if wide:
        rule = "=" * 30
        return f"{rule}\n          SCORE: {score:04d}     \n{rule}\n\n"
    rule = "=" * 21
    return f"{rule}\n     SCORE: {score:04d}     \n{rule}\n\n"


class LaserGame:
    """A plane firing a laser straight up at a single target.

    Once fired, the laser stays on. Without scoring a hit target is gone
    for good; with scoring each hit earns 10 points and moves the target.
    """

    def __init__(self, rng: random.Random | None = None, scoring: bool = True):
        self.rng = rng if rng is not None else random.Random()
        self.scoring = scoring
        self.row = 5
        self.column = 10
        self.target = 5
        self.firing = False
        self.hit = False
        self.score = 0

    def render(self) -> str:
        parts = []
        if self.scoring:
            parts.append(score_banner(self.score))
        if not self.hit:
            parts.append(" " * self.target + " +\n")
        pad = " " * self.column
        if self.firing:
            parts.append((pad + "  |\n") * max(self.row, 0))
        else:
            parts.append("\n" * max(self.row, 0))
        parts.append(f"{pad}  *\n{pad}*****\n{pad} * * \n")
        return "".join(parts)

    def handle_key(self, key: str | None) -> None:
        if key == "a":
            self.column -= 1
        elif key == "d":
            self.column += 1
        elif key == "s":
            self.row += 1
        elif key == "w":
            self.row -= 1
        elif key == " ":
            self.firing = True

    def tick(self) -> None:
        if self.scoring and self.hit:
            self.score += 10
            self.hit = False
            self.target = self.rng.randrange(30)
        if self.firing and self.column + 2 == self.target:
            self.hit = True


class PlaneGame:
    """A plane shooting bullets at an enemy that drifts down the screen.

    ``bounded`` keeps the plane on screen, speeds bullets up with the score
    and lets Escape end the game.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        height: int = 20,
        width: int = 30,
        bounded: bool = True,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.height = height
        self.width = width
        self.bounded = bounded
        self.plane_row = height // 2
        self.plane_col = width // 2
        self.bullet_row = -1
        self.bullet_col = self.plane_col
        self.enemy_row = 0
        self.enemy_col = self.plane_col
        self.bullet_speed = 1
        self.score = 0
        self.over = False
        self._wait = 0

    def render(self) -> str:
        return "".join(self._render_row(i) + "\n" for i in range(self.height))

    def _render_row(self, i: int) -> str:
        cells = []
        j = 0
        while j < self.width:
            if i == self.plane_row and j == self.plane_col - 2:
                cells.append("  *  ")
                j += 5
                continue
            if i == self.plane_row + 1 and j == self.plane_col - 2:
                cells.append("*****")
                j += 5
                continue
            if i == self.plane_row + 2 and j == self.plane_col - 1:
                cells.append("* * ")
                j += 5
                continue
            if i == self.enemy_row and j == self.enemy_col:
                cells.append("@")
            elif i == self.bullet_row and j == self.bullet_col:
                cells.append("|")
            else:
                cells.append(" ")
            j += 1
        return "".join(cells)

    def tick(self) -> None:
        if self.bounded:
            if self.bullet_row > -1:
                self.bullet_row -= self.bullet_speed
            in_reach = self.bullet_row <= self.enemy_row <= self.bullet_row + self.bullet_speed
        else:
            if self.bullet_row > -1:
                self.bullet_row -= 1
            in_reach = self.bullet_row == self.enemy_row
        if in_reach and self.bullet_col == self.enemy_col:
            self.score += 1
            self._respawn_enemy()
            self.bullet_row = -2
            if self.bounded:
                self.bullet_speed = min(1 + self.score // 5, MAX_BULLET_SPEED)
        if self.enemy_row > self.height:
            self._respawn_enemy()
        if self._wait < ENEMY_PERIOD:
            self._wait += 1
        if self._wait == ENEMY_PERIOD:
            self.enemy_row += 1
            self._wait = 0

    def _respawn_enemy(self) -> None:
        self.enemy_row = -1
        self.enemy_col = self.rng.randrange(self.width)

    def handle_key(self, key: str | None) -> None:
        bounded = self.bounded
        if key == "a" and (not bounded or self.plane_col > 2):
            self.plane_col -= 1
        elif key == "d" and (not bounded or self.plane_col < self.width - 3):
            self.plane_col += 1
        elif key == "s" and (not bounded or self.plane_row < self.height - 3):
            self.plane_row += 1
        elif key == "w" and (not bounded or self.plane_row > 0):
            self.plane_row -= 1
        elif key == " ":
            self.bullet_row = self.plane_row - 1
            self.bullet_col = self.plane_col
        elif key == ESCAPE and bounded:
            self.over = True


def run(console: Console, rng: random.Random | None = None) -> int:
    """Play the shooter until Escape is pressed; return the final score."""
    game = PlaneGame(rng)
    while True:
        console.home()
        console.write(game.render())
        game.tick()
        key = console.read_key()
        if key is not None:
            game.handle_key(key)
        console.write(score_banner(game.score, wide=True))
        if game.over:
            console.clear()
            console.write("\n" * 10 + " " * 10 + f"Game over. Final score: {game.score}\n")
            console.pause(2)
            return game.score
        console.pause(FRAME_DELAY)


def _run_laser(console: Console, rng: random.Random) -> int:
    game = LaserGame(rng)
    while True:
        console.clear()
        console.write(game.render())
        game.tick()
        key = console.read_key()
        if key == ESCAPE:
            return game.score
        game.handle_key(key)
        console.pause(LASER_FRAME_DELAY)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="plane", description="Console plane shooter.")
    parser.add_argument("--seed", type=int, default=None, help="seed for enemy placement")
    parser.add_argument(
        "--classic", action="store_true", help="play the single-target laser game (Esc quits)"
    )
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    with Console() as console:
        if args.classic:
            _run_laser(console, rng)
        else:
            run(console, rng)
    return 0