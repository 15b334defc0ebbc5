"""Anagram crosswords, the Game of Life and recursive fractal figures."""

__version__ = "0.1.0"
__all__ = ["crossword", "life", "fractals"]