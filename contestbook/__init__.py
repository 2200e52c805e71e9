"""Solutions to classic competitive-programming problems, with a command-line solver."""

__version__ = "0.1.0"