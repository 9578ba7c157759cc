import logging
import re
from typing import Iterator
from xml.etree import ElementTree

from gpx_reader.errors import GPXReadError
from gpx_reader.track import Track, TrackPoint

logger = logging.getLogger(__name__)

TRACK_POINT_TAG = "trkpt"
LATITUDE_ATTRIBUTE = "lat"
LONGITUDE_ATTRIBUTE = "lon"

# Plain decimal literals, no digit separators or padding
DECIMAL_PATTERN = re.compile(r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)", re.IGNORECASE)


def local_name(tag: str) -> str:
    """Strip the namespace from an ElementTree tag ('{uri}trkpt' -> 'trkpt')."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def parse_coordinate(value: str) -> float:
    if not DECIMAL_PATTERN.fullmatch(value):
        error = ValueError(f"could not convert string to float: {value!r}")
        raise GPXReadError.parse(value, error)
    return float(value)


class GPXParser:
    """
    A class to stream track points out of a GPX file.

    The document is read as a sequence of start and end events and never
    kept in memory as a whole. Only trkpt elements are looked at; everything
    else is skipped.

    Attributes:
        path (str): Path to the GPX file.

    Methods:
        iter_track_points() -> Iterator[TrackPoint]:
            Lazily yield the track points in document order.
        parse() -> Track:
            Read all track points into a Track.
    """
    def __init__(self, path: str):
        self.path = path

    def iter_track_points(self) -> Iterator[TrackPoint]:
        """
        Yield one TrackPoint per trkpt element, in document order.

        Every call opens the file again and starts from the beginning.
        Missing lat or lon attributes default to 0.0.

            Raises:
                GPXReadError: XML kind if the file cannot be read or is not
                    well-formed, PARSE kind if a coordinate is not a number.
        """
        try:
            with open(self.path, "rb") as gpx_file:
                open_elements = []
                for event, element in ElementTree.iterparse(gpx_file, events=("start", "end")):
                    if event == "end":
                        # detach finished elements so the tree never grows
                        open_elements.pop()
                        if open_elements:
                            open_elements[-1].remove(element)
                        continue
                    open_elements.append(element)
                    if local_name(element.tag) != TRACK_POINT_TAG:
                        continue

                    latitude = 0.0
                    longitude = 0.0
                    for key, value in element.attrib.items():
                        if key == LATITUDE_ATTRIBUTE:
                            latitude = parse_coordinate(value)
                        elif key == LONGITUDE_ATTRIBUTE:
                            longitude = parse_coordinate(value)

                    yield TrackPoint(latitude=latitude, longitude=longitude)
        except ElementTree.ParseError as e:
            raise GPXReadError.xml(e) from e
        except OSError as e:
            raise GPXReadError.xml(e) from e

    def parse(self) -> Track:
        """
        Read all track points of the file into a new Track.

            Returns:
                Track: The track points in document order.

            Raises:
                GPXReadError: On the first error; no partial track is returned.
        """
        track = Track()
        for point in self.iter_track_points():
            track.add(point)
        logger.debug(f"Read {len(track)} track points from {self.path}")
        return track
