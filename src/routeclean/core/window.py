from collections import deque
from typing import Iterator

from routeclean.core.point import Point
from routeclean.errors import WindowOverflowError


class PointWindow:
    """
    Fixed-capacity ordered buffer of the most recent unresolved points,
    oldest first.
    """

    def __init__(self, capacity: int = 3):
        if capacity < 1:
            raise ValueError("Window capacity must be at least 1.")
        self.capacity = capacity
        self._points: deque[Point] = deque()

    def __len__(self) -> int:
        return len(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    @property
    def is_full(self) -> bool:
        return len(self._points) == self.capacity

    def push(self, point: Point) -> None:
        if self.is_full:
            raise WindowOverflowError(
                f"Window already holds {self.capacity} points; resolve it before pushing."
            )
        self._points.append(point)

    def pop_oldest(self) -> Point:
        if not self._points:
            raise IndexError("pop from an empty window")
        return self._points.popleft()

    def remove_middle(self) -> Point:
        """Drops the middle point of a full 3-point window and returns it."""
        if len(self._points) != 3:
            raise IndexError("remove_middle needs exactly 3 points in the window")
        middle = self._points[1]
        del self._points[1]
        return middle

    def clear(self) -> None:
        self._points.clear()
