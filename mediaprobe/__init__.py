"""
mediaprobe - video duration lookup via mediainfo

This package runs the mediainfo command-line tool on a media file and
returns the duration of its first video stream:
- Builds the mediainfo command selecting only the duration field
- Checks the exit status and reads the single line it prints
- Converts the millisecond count into a timedelta

Any failure is logged and yields None instead of raising.
"""

from .mediainfo import Mediainfo

__version__ = "0.1.0"

__all__ = ["Mediainfo", "__version__"]
