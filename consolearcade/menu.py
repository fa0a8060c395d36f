"""The arcade menu that starts each of the games."""

from __future__ import annotations

import argparse
import enum
import random

from . import bird, brick, plane, snake
from .console import Color, Console, colored

MENU_WIDTH = 20
TITLE = "游戏合集"
INVALID_DELAY = 0.5
KEY_POLL_DELAY = 0.05


class MenuChoice(str, enum.Enum):
    """Entries of the menu, keyed by the digit that picks them."""

    BIRD = "1"
    BRICK = "2"
    PLANE = "3"
    SNAKE = "4"
    EXIT = "5"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    MenuChoice.BIRD: "像素鸟",
    MenuChoice.BRICK: "打砖块",
    MenuChoice.PLANE: "飞机大战",
    MenuChoice.SNAKE: "贪吃蛇",
    MenuChoice.EXIT: "退出",
}

_GAMES = {
    MenuChoice.BIRD: bird.run,
    MenuChoice.BRICK: brick.run,
    MenuChoice.PLANE: plane.run,
    MenuChoice.SNAKE: snake.run,
}


def render_menu(width: int) -> str:
    """The coloured menu, centred for a console of the given width."""
    pad = " " * abs(int((width - MENU_WIDTH) / 2))
    parts = [
        "\n\n",
        pad,
        colored("====== ", Color.CYAN),
        colored("游戏菜单", Color.YELLOW),
        colored(" ======\n", Color.CYAN),
    ]
    for choice in MenuChoice:
        parts += [
            pad,
            colored(f"{choice.value}. ", Color.GREEN),
            colored(f"{choice.label}\n", Color.MAGENTA),
        ]
    parts += [
        pad,
        colored("======================\n\n", Color.CYAN),
        pad,
        colored("请选择 (1-5): ", Color.YELLOW),
    ]
    return "".join(parts)


def parse_choice(key: str | None) -> MenuChoice:
    """The menu entry for a key; raises ValueError for any other key."""
    try:
        return MenuChoice(key)
    except ValueError:
        raise ValueError(f"invalid menu choice: {key!r}") from None


def _wait_key(console: Console) -> str:
    while True:
        key = console.read_key()
        if key is not None:
            return key
        console.pause(KEY_POLL_DELAY)


def _menu_loop(console: Console, rng: random.Random) -> None:
    while True:
        console.clear()
        console.write(render_menu(console.width()))
        try:
            choice = parse_choice(_wait_key(console))
        except ValueError:
            console.write("\n无效选择!", Color.RED)
            console.pause(INVALID_DELAY)
            continue
        if choice is MenuChoice.EXIT:
            return
        _GAMES[choice](console, rng)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="consolearcade", description="Console game collection.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the games")
    args = parser.parse_args(argv)
    with Console() as console:
        console.write(f"\x1b]0;{TITLE}\x07")
        _menu_loop(console, random.Random(args.seed))
    return 0