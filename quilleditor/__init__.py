"""A small plain-text editor with console and windowed front ends."""

__version__ = "0.1.0"
__all__ = ["__version__"]