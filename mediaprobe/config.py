"""Configuration settings for mediaprobe

Settings are read once from environment variables when the module is
imported:
- MEDIAPROBE_MEDIAINFO: mediainfo executable name or path
- MEDIAPROBE_TIMEOUT: seconds to wait for mediainfo (unset: wait forever)
- MEDIAPROBE_LOG_LEVEL: default logging level
- MEDIAPROBE_LOG_FILE: optional log file
"""

import os
from pathlib import Path
from typing import Optional

# Bare name, resolved through PATH
DEFAULT_EXECUTABLE = "mediainfo"

# Selects the duration (in milliseconds) of the first video stream only
DURATION_OUTPUT = "--Output=Video;%Duration%"

def _optional_path(name: str) -> Optional[Path]:
    value = os.environ.get(name, "").strip()
    return Path(value) if value else None

MEDIAINFO_EXECUTABLE = os.environ.get("MEDIAPROBE_MEDIAINFO") or DEFAULT_EXECUTABLE

# Raw text, converted and checked by the command-line interface
PROBE_TIMEOUT = os.environ.get("MEDIAPROBE_TIMEOUT", "").strip() or None

# Logging configuration
LOG_LEVEL = os.environ.get("MEDIAPROBE_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_FILE = _optional_path("MEDIAPROBE_LOG_FILE")
