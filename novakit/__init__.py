"""Small building blocks: value-or-error results, binary data views, sorted maps, measures, random helpers, process controls and timing loops."""

__version__ = "0.1.0"
__all__ = ["__version__"]