"""plughost - optional feature plugins for frame-driven host applications."""

__version__ = "0.1.0"
