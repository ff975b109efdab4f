"""Icarus - a Trémaux maze solver for the Daedalus labyrinth host."""

__version__ = "1.0.0"
