"""String, number and string-list helpers following C string-routine rules."""

__version__ = "0.1.0"
__all__ = ["arrays", "chars", "edit", "numbers", "output", "parsing", "search", "transform"]