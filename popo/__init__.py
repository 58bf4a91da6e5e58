"""Poisson disc sampling inside polygons, with vector and polygon helpers."""

__version__ = "0.1.0"
__all__ = ["cli", "polygons", "sampling", "vectors"]