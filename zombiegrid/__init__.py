"""Zombie outbreak cellular automaton on generated terrain, with a pygame viewer."""

__version__ = "0.1.0"
__all__ = ["terrain", "state", "world"]