from dataclasses import dataclass

@dataclass(frozen=True)
class Point:
    """
    Represents a single GPS fix (lat, lon, t).
    timestamp is in whole seconds (unix epoch in the reference data).
    """
    lat: float
    lon: float
    timestamp: int

    @property
    def tuple(self):
        return (self.lat, self.lon, self.timestamp)
