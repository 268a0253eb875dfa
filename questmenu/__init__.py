"""A small game menu with image buttons that switch between screens."""

__version__ = "0.1.0"
__all__ = ["__version__"]