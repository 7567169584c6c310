"""A small terminal text editor: editing state, key handling, screen rendering and a raw-mode terminal."""

__version__ = "0.0.1"
__all__ = ["editor", "keys", "render", "row", "terminal"]