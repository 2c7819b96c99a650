"""Custom exceptions for mediaprobe

Probe failures never reach callers of the public API: they are raised inside
the probe and turned into a missing result at its boundary.
"""

class MediaprobeError(Exception):
    """Base exception for all mediaprobe errors"""
    def __init__(self, message: str, module: str = None):
        self.message = message
        self.module = module or "unknown"
        super().__init__(f"[{self.module}] {self.message}")

class ProbeError(MediaprobeError):
    """Base class for failures while probing a media file"""
    def __init__(self, message: str, module: str = None):
        super().__init__(f"Probe error: {message}", module)

class SpawnError(ProbeError):
    """The analyzer process could not be started"""

class ExitStatusError(ProbeError):
    """The analyzer exited with a non-zero status"""
    def __init__(self, exit_code: int, module: str = None):
        self.exit_code = exit_code
        super().__init__(f"received an exit code different than 0: {exit_code}", module)

class WaitInterruptedError(ProbeError):
    """Waiting for the analyzer to terminate was cut short"""

class OutputReadError(ProbeError):
    """The analyzer output could not be read"""

class InvalidDurationError(ProbeError):
    """The analyzer output is not a duration"""
    def __init__(self, output: str, module: str = None):
        self.output = output
        super().__init__(f"'{output}' is not a valid duration", module)
