"""A raster canvas with shape and text drawing, and a tree of render objects for layout."""

__version__ = "0.1.0"

__all__ = ["canvas", "cli", "decorators", "flex", "geometry", "objects", "text"]