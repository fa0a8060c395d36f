import io
import random

import pytest

from consolearcade.bird import BirdGame, run
from consolearcade.brick import GameOver
from consolearcade.console import Console


def test_initial_render_layout():
    game = BirdGame(random.Random(0))
    lines = game.render().splitlines()
    assert len(lines) == game.height + 2
    assert lines[0][game.bird_col + 1] == "@"
    assert lines[game.height] == "-" * (game.width + 2)
    assert lines[-1] == "score: 0"
    assert all(line.startswith("|") and line.endswith("|") for line in lines[: game.height])


def test_pipe_drawn_outside_gap():
    game = BirdGame(random.Random(0))
    lines = game.render().splitlines()
    column = [lines[i][game.pipe_col + 1] for i in range(game.height)]
    for i, ch in enumerate(column):
        inside = game.gap_top <= i <= game.gap_bottom
        assert ch == (" " if inside else "*")


def test_bird_falls_and_pipe_scrolls():
    game = BirdGame(random.Random(0))
    start_pipe = game.pipe_col
    game.tick()
    assert game.bird_row == 1
    assert game.pipe_col == start_pipe - 1


def test_hitting_pipe_ends_game():
    game = BirdGame(random.Random(0))
    for _ in range(3):
        game.tick()
    with pytest.raises(GameOver):
        game.tick()


def test_passing_gap_scores():
    game = BirdGame(random.Random(0))
    game.bird_row = 1
    for _ in range(4):
        game.tick()
    assert game.score == 1
    assert game.gap_top <= game.bird_row <= game.gap_bottom


def test_space_flaps_up():
    game = BirdGame()
    game.bird_row = 5
    game.handle_key(" ")
    assert game.bird_row == 3
    game.handle_key("x")
    assert game.bird_row == 3


def test_pipe_respawns_with_new_gap():
    game = BirdGame(random.Random(9))
    game.pipe_col = 1
    game.tick()
    assert game.pipe_col == game.width
    assert game.gap_bottom - game.gap_top == 2 * (game.height // 10)
    centre = (game.gap_top + game.gap_bottom) // 2
    assert 0 <= centre < int(game.height * 0.8)


def test_run_reports_game_over():
    out = io.StringIO()
    console = Console(stream=out, keys=[None, None, None, "x"])
    score = run(console, random.Random(0))
    text = out.getvalue()
    assert score == 0
    assert "Game over\n" in text
    assert "score: 0" in text