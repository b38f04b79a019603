import abc
import csv
import json
import sys
from typing import List, Optional, TextIO

from shapely.geometry import LineString, mapping
from shapely.geometry import Point as ShapelyPoint

from routeclean.core.point import Point


class PointWriter(abc.ABC):
    """
    Abstract base class for point sinks.
    start() is called once before the first write, finish() once after the last.
    """

    format_name: str = ''

    def __init__(self, out: Optional[TextIO] = None):
        self.out = out if out is not None else sys.stdout

    @classmethod
    def can_write(cls, fmt: str) -> bool:
        return fmt.strip().lower() == cls.format_name

    def start(self) -> None:
        pass

    @abc.abstractmethod
    def write(self, point: Point) -> None:
        """Writes a single point to the output."""

    def finish(self) -> None:
        pass


class CsvPointWriter(PointWriter):
    """Writes one `lat,lon,timestamp` line per point as soon as it arrives."""

    format_name = 'csv'

    def start(self) -> None:
        self._writer = csv.writer(self.out, lineterminator='\n')

    def write(self, point: Point) -> None:
        self._writer.writerow(point.tuple)

    def finish(self) -> None:
        self.out.flush()


class GeoJsonPointWriter(PointWriter):
    """
    Collects the route and writes it as a GeoJSON FeatureCollection on finish().
    The route is a single LineString feature (a Point when only one fix survives),
    with the fix timestamps kept in the feature properties.
    """

    format_name = 'geojson'

    def start(self) -> None:
        self._points: List[Point] = []

    def write(self, point: Point) -> None:
        self._points.append(point)

    def finish(self) -> None:
        features = []
        if self._points:
            # GeoJSON coordinates are (lon, lat)
            coords = [(p.lon, p.lat) for p in self._points]
            geom = LineString(coords) if len(coords) > 1 else ShapelyPoint(coords[0])
            features.append({
                'type': 'Feature',
                'geometry': mapping(geom),
                'properties': {'timestamps': [p.timestamp for p in self._points]}
            })

        json.dump({'type': 'FeatureCollection', 'features': features}, self.out)
        self.out.write('\n')
        self.out.flush()
