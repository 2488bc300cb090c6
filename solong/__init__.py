"""A tile puzzle game: .ber maps, XPM tile images and a pygame window."""

__version__ = "1.0.0"
__all__ = ["__version__"]