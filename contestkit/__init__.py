"""Solutions to competitive-programming problems as plain Python functions, with a small CLI."""

__version__ = "0.1.0"