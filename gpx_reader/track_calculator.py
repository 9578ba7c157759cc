import math
from haversine import haversine, Unit

EARTH_RADIUS_KM = 6371.0


class TrackCalculator:
    """
    Helpers for distances between track points.
    """
    def distance(self, point1, point2) -> float:
        """
        Calculate the great-circle distance between two track points.

        Both cosine terms use the latitude of point1, so the result is only
        symmetric for points on the same latitude. Existing track lengths
        depend on this, see haversine_distance for the textbook formula.
        Args:
            point1 (TrackPoint): The origin point.
            point2 (TrackPoint): The destination point.
        Returns:
            float: Distance in kilometers on a sphere of EARTH_RADIUS_KM.
        """
        d_lat = math.radians(point2.latitude - point1.latitude)
        d_lon = math.radians(point2.longitude - point1.longitude)

        lat1 = math.radians(point1.latitude)
        lat2 = math.radians(point1.latitude)

        a = math.sin(d_lat / 2) ** 2 + math.sin(d_lon / 2) ** 2 * math.cos(lat1) * math.cos(lat2)
        # lat2 repeats lat1, so a can exceed 1
        a = min(a, 1.0)
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

        return c * EARTH_RADIUS_KM

    def haversine_distance(self, point1, point2) -> float:
        """
        Calculate the Haversine distance between two track points with the haversine library
        on a sphere of EARTH_RADIUS_KM.
        Args:
            point1 (TrackPoint): The first track point.
            point2 (TrackPoint): The second track point.
        Returns:
            float: Distance in kilometers.
        """
        central_angle = haversine((point1.latitude, point1.longitude), (point2.latitude, point2.longitude), unit=Unit.RADIANS)
        return central_angle * EARTH_RADIUS_KM
