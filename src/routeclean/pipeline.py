import logging
from typing import Iterable, Optional

from routeclean.core.point import Point
from routeclean.modules.route_filter.filter import RouteFilter
from routeclean.modules.route_filter.wrapper import FilteredStreamWrapper
from routeclean.output.writers import PointWriter

logger = logging.getLogger(__name__)

def clean_route(
    points: Iterable[Point],
    writer: PointWriter,
    route_filter: Optional[RouteFilter] = None
) -> RouteFilter:
    """
    Runs a point source through a RouteFilter into a writer.

    Args:
        points: Any iterable of points, usually a PointReader.
        writer: Sink receiving the accepted points in order.
        route_filter: Filter to use. A fresh default one is created if None.

    Returns:
        The RouteFilter, whose counters and error_points describe the run.
    """
    route_filter = route_filter or RouteFilter()

    writer.start()
    for point in FilteredStreamWrapper(point_stream=points, route_filter=route_filter):
        writer.write(point)
    writer.finish()

    logger.debug(
        "Route cleaned: %d in, %d out, %d rejected",
        route_filter.points_in, route_filter.points_out, route_filter.points_rejected
    )
    return route_filter
