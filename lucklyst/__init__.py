"""Lucky-draw game where the first fruit to land picks the winning customer."""

__version__ = "0.1.0"
__all__ = ["__version__"]