"""Terminal arcade games: pixel bird, brick breaker, plane shooter and snake, with a menu."""

__version__ = "0.1.0"
__all__ = ["bird", "brick", "console", "menu", "plane", "snake"]