import math
from typing import Tuple

from routeclean.config import EARTH_RADIUS_KM
from routeclean.core.point import Point

def haversine_distance(p1: Point, p2: Point, radius_km: float = EARTH_RADIUS_KM, exact: bool = False) -> float:
    """
    Great-circle distance in kilometres between two points.

    With exact=False the cosine term is applied to the raw degree latitudes,
    matching the distances produced by the original route cleaner. exact=True
    converts them to radians like the textbook formula.
    """
    dlat = math.radians(p2.lat - p1.lat)
    dlon = math.radians(p2.lon - p1.lon)
    if exact:
        cos_term = math.cos(math.radians(p1.lat)) * math.cos(math.radians(p2.lat))
    else:
        cos_term = math.cos(p1.lat) * math.cos(p2.lat)

    a = math.sin(dlat / 2) ** 2 + cos_term * math.sin(dlon / 2) ** 2
    if a < 0:
        # Only reachable with the legacy cosine term, whose product can be negative.
        # The distance is undefined there, not zero.
        return math.nan
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return radius_km * c

def _clamped_acos(value: float) -> float:
    return math.acos(min(1.0, max(-1.0, value)))

def solve_triangle(ab: float, bc: float, ac: float) -> Tuple[float, float, float]:
    """
    Solves the interior angles of a triangle ABC from its side lengths.

                  C
                 / \\
             ac /   \\ bc
               /     \\
              A ----- B
                 ab

    Args:
        ab: Length of side A-B.
        bc: Length of side B-C.
        ac: Length of side A-C.

    Returns:
        Angles (at A, at B, at C) in degrees. The angle at B is derived as
        180 minus the other two, so the three always sum to 180.
    """
    if ab <= 0 or bc <= 0 or ac <= 0:
        raise ValueError(f"Triangle sides must be positive, got ({ab}, {bc}, {ac})")

    angle_a = math.degrees(_clamped_acos((ab * ab + ac * ac - bc * bc) / (2.0 * ab * ac)))
    angle_c = math.degrees(_clamped_acos((bc * bc + ac * ac - ab * ab) / (2.0 * bc * ac)))
    angle_b = 180.0 - angle_a - angle_c
    return angle_a, angle_b, angle_c
