import io
import random

import pytest

from consolearcade.console import Color, Console, colored
from consolearcade.menu import MenuChoice, _menu_loop, main, parse_choice, render_menu

LABELS = ["像素鸟", "打砖块", "飞机大战", "贪吃蛇", "退出"]


@pytest.mark.parametrize(
    "key, choice",
    [
        ("1", MenuChoice.BIRD),
        ("2", MenuChoice.BRICK),
        ("3", MenuChoice.PLANE),
        ("4", MenuChoice.SNAKE),
        ("5", MenuChoice.EXIT),
    ],
)
def test_parse_choice(key, choice):
    assert parse_choice(key) is choice


@pytest.mark.parametrize("key", ["0", "6", "x", "", None])
def test_parse_choice_rejects_other_keys(key):
    with pytest.raises(ValueError):
        parse_choice(key)


def test_labels_follow_menu_order():
    labels = [parse_choice(str(number)).label for number in range(1, 6)]
    assert labels == LABELS


def test_menu_starts_with_title():
    text = render_menu(20)
    expected = "\n\n" + colored("====== ", Color.CYAN) + colored("游戏菜单", Color.YELLOW)
    assert text.startswith(expected)


def test_menu_ends_with_prompt():
    assert render_menu(80).endswith(colored("请选择 (1-5): ", Color.YELLOW))


def test_menu_lists_entries_in_order():
    text = render_menu(80)
    positions = [text.index(colored(f"{label}\n", Color.MAGENTA)) for label in LABELS]
    assert positions == sorted(positions)
    for number in range(1, 6):
        assert colored(f"{number}. ", Color.GREEN) in text


@pytest.mark.parametrize("width", [20, 40, 100])
def test_menu_lines_are_padded(width):
    pad = " " * ((width - 20) // 2)
    lines = [line for line in render_menu(width).split("\n")[2:] if line.startswith(" ") or line.startswith("\x1b")]
    assert lines
    for line in lines:
        if line.startswith("\x1b[0m"):
            line = line[len("\x1b[0m"):]
        assert line.startswith(pad + "\x1b[")


def test_narrow_console_pads_by_magnitude():
    first = render_menu(11).split("\n")[2]
    assert first.startswith("    \x1b[")


def test_menu_loop_reports_invalid_choice_and_exits():
    out = io.StringIO()
    result = _menu_loop(Console(stream=out, keys=["7", "5"]), random.Random(0))
    text = out.getvalue()
    assert result is None
    assert colored("\n无效选择!", Color.RED) in text
    assert text.count("游戏菜单") == 2


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0