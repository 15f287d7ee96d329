"""Geometry types for geospatial applications, stored as flat coordinate lists."""

__version__ = "0.1.0"

__all__ = ["base", "units", "geometry", "multi", "sorting", "transform", "geomtest"]