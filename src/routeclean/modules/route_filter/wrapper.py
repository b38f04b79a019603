from typing import Iterable, Iterator

from routeclean.core.point import Point
from routeclean.modules.route_filter.filter import RouteFilter


class FilteredStreamWrapper:
    """
    Lazily cleans a route: pulls fixes from a source one at a time, passes
    each through the RouteFilter and yields only the fixes it confirms.

    Iterating the wrapper twice reuses the same filter, so build one wrapper
    per route.
    """

    def __init__(self, point_stream: Iterable[Point], route_filter: RouteFilter):
        """
        Args:
            point_stream: Source of fixes in recording order, e.g. a PointReader.
            route_filter: Filter holding the 3-point window and error log for this route.
        """
        self.point_stream = point_stream
        self.route_filter = route_filter

    def __iter__(self) -> Iterator[Point]:
        return self.stream()

    def stream(self) -> Iterator[Point]:
        """
        Yields confirmed fixes in recording order, two fixes behind the source.
        Rejected fixes go to route_filter.error_points instead. The last one or
        two fixes come out only once the source is exhausted.
        """
        for point in self.point_stream:
            confirmed = self.route_filter.process_point(point)
            if confirmed is not None:
                yield confirmed

        yield from self.route_filter.flush()
