import io
import time

import pytest

from consolearcade.console import (
    CLEAR,
    HIDE_CURSOR,
    HOME,
    RESET,
    SHOW_CURSOR,
    Color,
    Console,
    colored,
)


def _console(keys=()):
    stream = io.StringIO()
    return Console(stream, keys), stream


@pytest.mark.parametrize("color", list(Color))
def test_colored_wraps_text_and_resets(color):
    result = colored("menu", color)
    assert result.startswith("\x1b[")
    assert result.endswith("menu" + RESET)


def test_colors_use_distinct_sequences():
    prefixes = {colored("x", color) for color in Color}
    assert len(prefixes) == len(Color)


def test_write_plain_text_is_unchanged():
    console, stream = _console()
    console.write("hello")
    assert stream.getvalue() == "hello"


def test_write_with_color_matches_colored():
    console, stream = _console()
    console.write("hello", Color.YELLOW)
    assert stream.getvalue() == colored("hello", Color.YELLOW)


def test_scripted_keys_are_returned_in_order_then_none():
    console, _ = _console(["a", None, " "])
    assert [console.read_key() for _ in range(4)] == ["a", None, " ", None]


def test_context_hides_and_restores_cursor():
    console, stream = _console()
    with console as entered:
        assert entered is console
        assert stream.getvalue() == HIDE_CURSOR
    assert stream.getvalue() == HIDE_CURSOR + SHOW_CURSOR


def test_context_does_not_swallow_errors():
    console, stream = _console()
    with pytest.raises(KeyError) as info:
        with console:
            raise KeyError("boom")
    assert info.value.args == ("boom",)
    assert stream.getvalue() == HIDE_CURSOR + SHOW_CURSOR


def test_home_and_clear_sequences():
    console, stream = _console()
    console.home()
    console.clear()
    assert stream.getvalue() == HOME + CLEAR


def test_width_follows_columns_variable(monkeypatch):
    monkeypatch.setenv("COLUMNS", "123")
    console, _ = _console()
    assert console.width() == 123


def test_scripted_pause_returns_immediately():
    console, stream = _console()
    start = time.monotonic()
    console.pause(5)
    elapsed = time.monotonic() - start
    assert elapsed < 1
    assert stream.getvalue() == ""