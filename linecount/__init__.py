"""Count lines of code in a directory tree, grouped by language."""

__version__ = "0.3.14"