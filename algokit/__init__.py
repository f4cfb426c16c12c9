"""Solutions to classic algorithm puzzles on lists, trees, numbers, strings and sequences."""

__version__ = "0.1.0"

__all__ = ["arrays", "combinatorics", "linked", "numbers", "sequences", "text", "trees"]