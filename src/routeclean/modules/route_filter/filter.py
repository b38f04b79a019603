import logging
import math
from dataclasses import dataclass
from typing import List, Optional

from routeclean.config import FilterConfig
from routeclean.core.point import Point
from routeclean.core.window import PointWindow
from routeclean.modules.route_filter.geometry import haversine_distance, solve_triangle

logger = logging.getLogger(__name__)

ROUND_TRIP = "round_trip"
TIGHT_ANGLE = "tight_angle"

@dataclass(frozen=True)
class WindowDecision:
    """Outcome of evaluating the middle point of a 3-point window."""
    reject: bool
    reason: Optional[str] = None
    speed_kmph: Optional[float] = None
    angle_at_b: Optional[float] = None

class RouteFilter:
    """
    Online filter removing spurious GPS fixes from a route.

    Keeps a sliding window of 3 points A, B, C. B is rejected when A and C
    are the same location while B is not (a detour with no net displacement),
    or when the turn at B is tighter than the configured angle while the
    vehicle would have to travel faster than the configured speed.
    Trailing points that never get a third neighbour are trusted as-is.
    """

    def __init__(self, config: Optional[FilterConfig] = None):
        """
        Args:
            config: Thresholds to use. Defaults to FilterConfig().
        """
        self.config = config or FilterConfig()
        self.config.validate()

        self.window = PointWindow(capacity=3)
        # Rejected points, in the order they were rejected
        self.error_points: List[Point] = []

        self.points_in = 0
        self.points_out = 0

    @property
    def points_rejected(self) -> int:
        return len(self.error_points)

    def _distance(self, p1: Point, p2: Point) -> float:
        return haversine_distance(
            p1, p2,
            radius_km=self.config.earth_radius_km,
            exact=self.config.exact_haversine
        )

    def decide(self, a: Point, b: Point, c: Point) -> WindowDecision:
        """
        Decides whether the middle point b of the window (a, b, c) is erroneous.
        Does not touch the window or the error log.
        """
        dist_ab = self._distance(a, b)
        dist_bc = self._distance(b, c)
        dist_ac = self._distance(a, c)

        if math.isnan(dist_ab) or math.isnan(dist_bc) or math.isnan(dist_ac):
            logger.debug("Undefined distance in window %s, %s, %s; keeping middle point", a.tuple, b.tuple, c.tuple)
            return WindowDecision(reject=False)

        # a and c are the same place but b is not
        if dist_ac == 0 and dist_ab != 0:
            return WindowDecision(reject=True, reason=ROUND_TRIP)

        if dist_ab == 0 or dist_bc == 0 or dist_ac == 0:
            return WindowDecision(reject=False)

        elapsed = c.timestamp - a.timestamp
        if elapsed > 0:
            speed_kmph = (dist_ab + dist_bc) / elapsed * 3600
        else:
            logger.debug(
                "Non-increasing timestamps %s -> %s, treating speed as infinite",
                a.timestamp, c.timestamp
            )
            speed_kmph = math.inf

        _, angle_at_b, _ = solve_triangle(dist_ab, dist_bc, dist_ac)

        reject = angle_at_b < self.config.tight_angle_deg and speed_kmph > self.config.speed_limit_kmph
        return WindowDecision(
            reject=reject,
            reason=TIGHT_ANGLE if reject else None,
            speed_kmph=speed_kmph,
            angle_at_b=angle_at_b
        )

    def process_point(self, point: Point) -> Optional[Point]:
        """
        Ingest a new GPS point.

        Returns:
            The oldest point of the window once it has been confirmed, or None
            while the window is filling or when the middle point was rejected.
        """
        self.points_in += 1
        self.window.push(point)

        if not self.window.is_full:
            return None

        a, b, c = self.window
        decision = self.decide(a, b, c)

        if decision.reject:
            self.error_points.append(self.window.remove_middle())
            logger.debug(
                "Rejected %s (%s, speed=%s km/h, angle=%s deg)",
                b.tuple, decision.reason, decision.speed_kmph, decision.angle_at_b
            )
            return None

        self.points_out += 1
        return self.window.pop_oldest()

    def flush(self) -> List[Point]:
        """
        Emits the points left in the window at the end of the stream.
        They can't be evaluated without a successor, so they are kept.
        """
        flushed_points = list(self.window)
        self.window.clear()
        self.points_out += len(flushed_points)
        return flushed_points

    def process(self, points: List[Point]) -> List[Point]:
        """
        Batch-processing helper for testing/benchmarking.
        """
        result = []
        for p in points:
            accepted = self.process_point(p)
            if accepted is not None:
                result.append(accepted)
        result.extend(self.flush())
        return result
