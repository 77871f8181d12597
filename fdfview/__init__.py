"""Wireframe viewer for FdF height maps: parsing, projection, rasterising and a pygame window."""

__version__ = "0.1.0"