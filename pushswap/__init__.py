"""Two-stack integer sorting with eleven operations, a sorter and a checker."""

__version__ = "1.0.0"
__all__ = ["__version__"]