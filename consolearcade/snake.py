"""Snake on a walled board, with lives, wrap-around edges and power-up props."""

from __future__ import annotations

import argparse
import enum
import random

from .console import ESCAPE, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP, Console

HEIGHT = 20
WIDTH = 30

EMPTY = 0
HEAD = 1
HORIZONTAL_WALL = -1
VERTICAL_WALL = -2
FOOD = -3

START_LENGTH = 5
START_LIVES = 5
BASE_SPEED = 100
MIN_SPEED = 40
SLOW_SPEED = 200
SPEED_STEP = 30
SPEED_SPAN = 30
PROP_LIFETIME = 25
FOODS_PER_PROP = 5
FRAME_DELAY = 0.1

_INTERIOR = [(i, j) for i in range(1, HEIGHT - 1) for j in range(1, WIDTH - 1)]


class Direction(enum.IntEnum):
    """Direction the snake's head travels in."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


class Prop(enum.IntEnum):
    """Power-ups that appear after every few pieces of food."""

    HEART = -4
    POISON = -5
    FAST = -6
    SLOW = -7

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    EMPTY: " ",
    VERTICAL_WALL: "|",
    HORIZONTAL_WALL: "-",
    HEAD: "@",
    FOOD: "o",
    Prop.HEART: "H",
    Prop.POISON: "D",
    Prop.FAST: "+",
    Prop.SLOW: "-",
}

_KEY_DIRECTIONS = {
    "a": Direction.LEFT,
    KEY_LEFT: Direction.LEFT,
    "d": Direction.RIGHT,
    KEY_RIGHT: Direction.RIGHT,
    "w": Direction.UP,
    KEY_UP: Direction.UP,
    "s": Direction.DOWN,
    KEY_DOWN: Direction.DOWN,
}


class SnakeGame:
    """The snake board.

    Each board cell holds a code: walls, food and props are negative, the
    snake's segments are numbered from 1 at the head. With ``props`` the
    snake grows when it eats, passes through the walls and meets props;
    without it the snake keeps its length and dies on the walls.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        lives: int = START_LIVES,
        props: bool = True,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.props = props
        self.height = HEIGHT
        self.width = WIDTH
        self.lives = lives
        self.score = 0
        self.over = False
        self.quit = False
        self.speed = BASE_SPEED
        self.speed_timer = 0
        self.prop: tuple[int, int] | None = None
        self._grid = [[EMPTY] * WIDTH for _ in range(HEIGHT)]
        for row in self._grid:
            row[0] = row[-1] = VERTICAL_WALL
        self._grid[0] = [HORIZONTAL_WALL] * WIDTH
        self._grid[-1] = [HORIZONTAL_WALL] * WIDTH
        self.reset()

    def reset(self) -> None:
        """Clear the board and lay out a fresh snake and food.

        Score, lives and speed are kept.
        """
        for i, j in _INTERIOR:
            self._grid[i][j] = EMPTY
        mid_row, mid_col = HEIGHT // 2, WIDTH // 2
        for k in range(START_LENGTH):
            self._grid[mid_row][mid_col - k] = k + 1
        self.direction = Direction.RIGHT
        self.food = self._random_empty_cell()
        self._set(self.food, FOOD)
        self.food_count = 0
        self.prop_type: Prop | None = None
        self.prop_timer = 0

    def cell(self, row: int, col: int) -> int:
        """The code stored in a board cell."""
        return self._grid[row][col]

    def step(self) -> None:
        """Advance the snake one cell in its current direction."""
        if self.over:
            return
        if self.props and self.speed_timer > 0:
            self.speed_timer -= 1
            if self.speed_timer == 0:
                self.speed = BASE_SPEED

        body = [pos for pos in _INTERIOR if self._get(pos) > 0]
        for pos in body:
            self._set(pos, self._get(pos) + 1)
        tail = max(body, key=self._get)
        head = next(pos for pos in body if self._get(pos) == HEAD + 1)
        if not self.props:
            self._set(tail, EMPTY)

        d_row, d_col = self.direction.delta
        row, col = head[0] + d_row, head[1] + d_col
        if self.props:
            row, col = self._wrap(row, col)
        target = (row, col)

        if self.props:
            value = self._get(target)
            if value < 0:
                self._apply_prop(value)
            if self.prop_type is not None:
                self.prop_timer -= 1
                if self.prop_timer <= 0:
                    self._set(self.prop, EMPTY)
                    self.prop_type = None

        if self._get(target) == FOOD:
            self._eat()
        else:
            self._set(tail, EMPTY)

        value = self._get(target)
        if value > 0 or value in (HORIZONTAL_WALL, VERTICAL_WALL):
            self._lose_life()
        else:
            self._set(target, HEAD)

    def handle_key(self, key: str | None) -> None:
        """Turn and move at once on a direction key; Escape quits."""
        if key == ESCAPE:
            self.quit = True
            return
        direction = _KEY_DIRECTIONS.get(key)
        if direction is not None:
            self.direction = direction
            self.step()

    def render(self) -> str:
        lines = ["".join(self._symbol(v) for v in row) + "\n" for row in self._grid]
        if self.props:
            lines.append(f"Score: {self.score}   lives: {self.lives}\n")
            if self.over:
                lines.append(f"Game Over! Final Score: {self.score}\n")
        else:
            lines.append(f"Score: {self.score}\n")
        return "".join(lines)

    @staticmethod
    def _symbol(value: int) -> str:
        return "*" if value > HEAD else _SYMBOLS.get(value, " ")

    def _get(self, pos: tuple[int, int]) -> int:
        return self._grid[pos[0]][pos[1]]

    def _set(self, pos: tuple[int, int], value: int) -> None:
        self._grid[pos[0]][pos[1]] = value

    @staticmethod
    def _wrap(row: int, col: int) -> tuple[int, int]:
        if row == 0:
            row = HEIGHT - 2
        elif row == HEIGHT - 1:
            row = 1
        if col == 0:
            col = WIDTH - 2
        elif col == WIDTH - 1:
            col = 1
        return row, col

    def _random_cell(self) -> tuple[int, int]:
        row = self.rng.randrange(HEIGHT - 5) + 2
        col = self.rng.randrange(WIDTH - 5) + 2
        return row, col

    def _random_empty_cell(self) -> tuple[int, int]:
        while True:
            pos = self._random_cell()
            if self._get(pos) == EMPTY:
                return pos

    def _apply_prop(self, value: int) -> None:
        if value == Prop.HEART:
            self.lives += 1
        elif value == Prop.POISON:
            self.lives = self.lives - 1 if self.lives > 1 else 0
            if self.lives <= 0:
                self.over = True
        elif value == Prop.FAST:
            self.speed = self.speed - SPEED_STEP if self.speed > MIN_SPEED else MIN_SPEED
            self.speed_timer = SPEED_SPAN
        elif value == Prop.SLOW:
            self.speed = self.speed + SPEED_STEP if self.speed > MIN_SPEED else SLOW_SPEED
            self.speed_timer = SPEED_SPAN
        self.prop_type = None

    def _eat(self) -> None:
        self._set(self.food, EMPTY)
        self.food = self._random_cell()
        self._set(self.food, FOOD)
        self.score += 1
        if not self.props:
            return
        self.food_count += 1
        if self.food_count >= FOODS_PER_PROP and self.prop_type is None:
            self.food_count = 0
            self.prop = self._random_empty_cell()
            roll = self.rng.randrange(100)
            if roll < 35:
                self.prop_type = Prop.HEART
            elif roll < 70:
                self.prop_type = Prop.POISON
            elif roll < 84:
                self.prop_type = Prop.FAST
            else:
                self.prop_type = Prop.SLOW
            self.prop_timer = PROP_LIFETIME
            self._set(self.prop, self.prop_type)

    def _lose_life(self) -> None:
        self.lives -= 1
        if self.lives <= 0:
            self.over = True
        else:
            self.reset()


def _play(console: Console, game: SnakeGame) -> int:
    console.clear()
    while True:
        console.home()
        console.write(game.render())
        if game.over:
            if not game.props:
                console.write("Game over\n")
            return game.score
        console.pause(FRAME_DELAY)
        game.step()
        key = console.read_key()
        if key is not None:
            game.handle_key(key)
        if game.quit:
            console.write("Game over\n")
            return game.score


def run(console: Console, rng: random.Random | None = None) -> int:
    """Play snake with lives and props until it ends; return the score."""
    return _play(console, SnakeGame(rng))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="snake", description="Console snake.")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--classic", action="store_true", help="one life, solid walls, no growth or props"
    )
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    with Console() as console:
        if args.classic:
            _play(console, SnakeGame(rng, lives=1, props=False))
        else:
            run(console, rng)
    return 0