"""A tile-based maze puzzle game played with pygame, with map checking and an XPM sprite reader."""

__version__ = "0.1.0"
__all__ = ["__version__"]