from .filter import RouteFilter, WindowDecision
from .geometry import haversine_distance, solve_triangle
from .wrapper import FilteredStreamWrapper
