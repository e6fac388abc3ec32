"""Surface distance along a straight path over gridded 8-bit elevation data."""

__version__ = "0.1.0"
__all__ = ["__version__"]