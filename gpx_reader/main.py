import logging
import os
import sys
from typing import List, Optional

from gpx_reader.errors import GPXReadError
from gpx_reader.gpx_parser import GPXParser

DEFAULT_LOG_LEVEL = logging.WARNING

logger = logging.getLogger(__name__)


def log_level(name: Optional[str]) -> int:
    """Resolve a level name like 'debug', falling back to WARNING for unknown names."""
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def main(argv: Optional[List[str]] = None) -> int:
    """
    Print the length of the track in a GPX file.
        Args:
            argv (Optional[List[str]]): Program name followed by the GPX file path.
                Defaults to sys.argv.
        Returns:
            int: Exit status, 0 on success.
    """
    # Set up logging
    logging.basicConfig(level=log_level(os.getenv("GPX_READER_LOG_LEVEL")))
    if argv is None:
        argv = sys.argv

    prog_name = argv[0] if argv else "gpx-reader"
    if len(argv) < 2:
        print(f"Usage: {prog_name} <GPX-FILE>")
        return 1

    path = argv[1]
    try:
        track = GPXParser(path).parse()
    except GPXReadError as e:
        logger.debug(f"Failed to read track from {path}: {e.kind.value} error", exc_info=True)
        print(e)
        return 1

    print(f"track length: {track.length():.2f}km")
    return 0


if __name__ == "__main__":
    sys.exit(main())
