from dataclasses import dataclass
from typing import Iterator, List, Optional

from gpx_reader.track_calculator import TrackCalculator


@dataclass(frozen=True)
class TrackPoint:
    """
    Represents a single recorded fix of a track.

    Attributes:
        latitude (float): Latitude in decimal degrees.
        longitude (float): Longitude in decimal degrees.
    """
    latitude: float
    longitude: float


class Track:
    """
    An ordered list of track points in recording order.

    Points are never reordered or deduplicated. An empty track is valid
    and has a length of 0.

    Attributes:
        points (List[TrackPoint]): Ordered list of track points.
    """
    points: List[TrackPoint]

    def __init__(self, points: Optional[List[TrackPoint]] = None):
        self.points = list(points) if points is not None else []
        self._calculator = TrackCalculator()

    @classmethod
    def from_gpx_file(cls, path: str) -> "Track":
        """
        Read all track points of a GPX file.

        Args:
            path (str): Path to the GPX file.
        Returns:
            Track: The track points in document order.
        Raises:
            GPXReadError: If the file is not well-formed XML or a coordinate is not a number.
        """
        from gpx_reader.gpx_parser import GPXParser
        return GPXParser(path).parse()

    def add(self, point: TrackPoint):
        self.points.append(point)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[TrackPoint]:
        return iter(self.points)

    def length(self) -> float:
        """
        Calculate the total length of the track.

        Sums the distance between each pair of consecutive points, left to right.
        Returns:
            float: Length in kilometers, 0.0 for fewer than two points.
        """
        total = 0.0
        for previous, current in zip(self.points, self.points[1:]):
            total += self._calculator.distance(previous, current)
        return total

    def cumulative_distances(self) -> List[float]:
        """
        Calculate the distance along the track from the first point to every point.

        Returns:
            List[float]: One entry per point, starting with 0.0. The last entry
                equals length().
        """
        if not self.points:
            return []
        distances = [0.0]
        for previous, current in zip(self.points, self.points[1:]):
            distances.append(distances[-1] + self._calculator.distance(previous, current))
        return distances

    def haversine_length(self) -> float:
        """
        Calculate the total length with the textbook haversine formula.

        Unlike length(), every segment uses the latitudes of both of its points.
        Returns:
            float: Length in kilometers.
        """
        total = 0.0
        for previous, current in zip(self.points, self.points[1:]):
            total += self._calculator.haversine_distance(previous, current)
        return total
