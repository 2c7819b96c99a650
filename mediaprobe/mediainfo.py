"""Video duration lookup through the mediainfo command-line tool

Responsibilities:
- Build the mediainfo command that prints only the video stream duration
- Run it, check the exit status and capture the first line of its output
- Parse that line as a millisecond count

Every failure is logged and reported to the caller as ``None``.
"""

import logging
import math
import os
import re
import subprocess
from datetime import timedelta
from typing import List, Optional, Sequence, Union

from .config import DEFAULT_EXECUTABLE, DURATION_OUTPUT
from .exceptions import (
    ProbeError, SpawnError, ExitStatusError, WaitInterruptedError,
    OutputReadError, InvalidDurationError
)

logger = logging.getLogger(__name__)

_MILLISECONDS = re.compile(r"\+?[0-9]+")

PathLike = Union[str, os.PathLike]

def parse_duration(output: str) -> timedelta:
    """
    Convert a mediainfo duration field into a timedelta.

    Args:
        output: Captured output line, a base-10 count of milliseconds.

    Returns:
        The duration.

    Raises:
        InvalidDurationError: If the text is not a non-negative integer.
    """
    if not _MILLISECONDS.fullmatch(output):
        raise InvalidDurationError(output, module="mediainfo")
    try:
        return timedelta(milliseconds=int(output))
    except (OverflowError, ValueError) as e:
        # Beyond what timedelta can hold
        raise InvalidDurationError(output, module="mediainfo") from e

def check_timeout(timeout: Optional[float]) -> Optional[float]:
    """Return ``timeout`` if it is None or a finite positive number of seconds"""
    if timeout is not None and not (math.isfinite(timeout) and timeout > 0):
        raise ValueError(f"timeout must be a positive number of seconds, got {timeout!r}")
    return timeout

class Mediainfo:
    """
    Determines media properties by running mediainfo.

    Attributes:
        executable (str): Path to mediainfo, defaults to ``mediainfo``
            which is looked up in ``PATH``
        timeout (Optional[float]): Seconds to wait for mediainfo to exit,
            ``None`` waits forever
    """
    def __init__(self, executable: Optional[str] = None, timeout: Optional[float] = None):
        self._executable = executable if executable is not None else DEFAULT_EXECUTABLE
        self._timeout = check_timeout(timeout)

    @property
    def executable(self) -> str:
        return self._executable

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def __repr__(self) -> str:
        return f"Mediainfo(executable={self._executable!r}, timeout={self._timeout!r})"

    def build_duration_command(self, path: PathLike) -> List[str]:
        """Command printing the video duration of ``path`` in milliseconds"""
        return [self._executable, DURATION_OUTPUT, os.path.abspath(os.fspath(path))]

    def determine_video_duration(self, path: PathLike) -> Optional[timedelta]:
        """
        Determine the duration of a media file.

        Args:
            path: The media file. Its existence is left for mediainfo to check.

        Returns:
            The duration of the first video stream, or None if it cannot be
            determined.
        """
        result = self.execute_command(self.build_duration_command(path))
        if result is None:
            return None
        try:
            return parse_duration(result)
        except InvalidDurationError as e:
            logger.warning("'%s' is not a valid duration", e.output)
            return None

    def create_process(self, command: Sequence[str]) -> subprocess.Popen:
        """Start ``command`` with its standard output piped as text"""
        return subprocess.Popen(
            list(command),
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True
        )

    def execute_command(self, command: Sequence[str]) -> Optional[str]:
        """
        Run a command and capture the first line it prints.

        Args:
            command: Argument vector, executable first.

        Returns:
            The first line of standard output without its line terminator,
            or None if the command failed or printed nothing.
        """
        logger.debug("Running command: %s", " ".join(command))
        try:
            return self._run(command)
        except ProbeError as e:
            logger.warning("Command %s failed: %s", " ".join(command), e.message)
            return None

    def _run(self, command: Sequence[str]) -> str:
        if not command:
            raise SpawnError("empty command", module="mediainfo")
        try:
            process = self.create_process(command)
        except (OSError, ValueError) as e:
            raise SpawnError(f"could not start {command[0]}: {e}", module="mediainfo") from e

        # Leaving the block closes the pipe and reaps the child
        with process:
            try:
                exit_code = process.wait(timeout=self._timeout)
            except subprocess.TimeoutExpired as e:
                process.kill()
                raise WaitInterruptedError(
                    f"no exit after {self._timeout} seconds", module="mediainfo"
                ) from e

            if exit_code != 0:
                raise ExitStatusError(exit_code, module="mediainfo")

            try:
                line = process.stdout.readline()
            except (OSError, ValueError) as e:
                raise OutputReadError(f"could not read output: {e}", module="mediainfo") from e

        if not line:
            raise OutputReadError("command printed nothing", module="mediainfo")
        return line.rstrip("\r\n")
