from typing import List
from routeclean.core.point import Point
from routeclean.modules.route_filter.geometry import haversine_distance

def calculate_removal_ratio(input_count: int, output_count: int) -> float:
    """
    Calculates the share of points removed by the filter.
    Ratio = (Input Count - Output Count) / Input Count.

    Args:
        input_count: Number of points read.
        output_count: Number of points kept.

    Returns:
        Removal ratio between 0.0 and 1.0. Returns 0.0 if nothing was read.
    """
    if input_count <= 0:
        return 0.0
    return (input_count - output_count) / input_count

def route_length_km(points: List[Point], exact: bool = False) -> float:
    """
    Sum of the haversine distances between consecutive points.
    Spikes inflate this heavily, so comparing raw and cleaned lengths shows
    how much the filter removed.
    """
    return sum(haversine_distance(p1, p2, exact=exact) for p1, p2 in zip(points, points[1:]))
