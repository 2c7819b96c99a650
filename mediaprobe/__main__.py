"""
Command-line interface for mediaprobe
"""
import argparse
import logging
import sys
from datetime import timedelta
from pathlib import Path

from . import __version__
from .config import LOG_FILE, LOG_LEVEL, MEDIAINFO_EXECUTABLE, PROBE_TIMEOUT
from .formatting import format_duration, print_error, print_info, print_success
from .logging import configure_logging
from .mediainfo import Mediainfo, check_timeout

def timeout_seconds(value: str) -> float:
    """argparse type for --timeout and MEDIAPROBE_TIMEOUT"""
    try:
        return check_timeout(float(value))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive number of seconds, got {value!r}")

def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="mediaprobe",
        description="Print the video duration of a media file using mediainfo"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=LOG_LEVEL.upper(),
        help="Set logging level (default: %(default)s)"
    )
    parser.add_argument(
        "--mediainfo",
        dest="executable",
        default=MEDIAINFO_EXECUTABLE,
        help="mediainfo executable name or path (default: %(default)s)"
    )
    parser.add_argument(
        "--timeout",
        type=timeout_seconds,
        default=PROBE_TIMEOUT,
        help="Seconds to wait for mediainfo before giving up (default: wait forever)"
    )
    parser.add_argument(
        "input",
        type=Path,
        help="Media file to probe"
    )
    return parser.parse_args(argv)

def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)
    configure_logging(args.log_level, LOG_FILE)

    log = logging.getLogger("mediaprobe")
    probe = Mediainfo(args.executable, timeout=args.timeout)
    print_info(f"Probing {args.input}")

    try:
        duration = probe.determine_video_duration(args.input)
    except KeyboardInterrupt:
        log.warning("Probe interrupted by user")
        return 130

    if duration is None:
        print_error(f"Could not determine the video duration of {args.input}")
        return 1

    milliseconds = duration // timedelta(milliseconds=1)
    print_success(f"{args.input.name}: {format_duration(duration)} ({milliseconds} ms)")
    return 0

if __name__ == "__main__":
    sys.exit(main())
