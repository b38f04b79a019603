"""Removes erroneous GPS fixes from recorded driving routes."""

from routeclean.config import FilterConfig
from routeclean.core.point import Point
from routeclean.modules.route_filter import FilteredStreamWrapper, RouteFilter
from routeclean.pipeline import clean_route

__version__ = "0.1.0"

__all__ = [
    "FilterConfig",
    "FilteredStreamWrapper",
    "Point",
    "RouteFilter",
    "clean_route",
]
