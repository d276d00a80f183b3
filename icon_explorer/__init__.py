"""Icon Explorer: browse, search and download a directory of SVG icons."""

__version__ = "1.0.0"
