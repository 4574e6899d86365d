#!/usr/bin/env python3
"""
Base module for all system information probes.
"""

import logging
import subprocess
from typing import List, Optional

logger = logging.getLogger("sysfetch")

# Upper bound for any external command, in seconds
COMMAND_TIMEOUT = 10


class ProbeError(Exception):
    """Base class for probe failures."""


class NotFoundError(ProbeError):
    """Expected data is absent (missing file, key, marker or variable)."""


class CommandError(ProbeError):
    """A command could not be run or a file could not be read."""


class ProbeResult:
    """Outcome of a single probe: a display value or a failure reason."""

    def __init__(self, label: str, value: Optional[str] = None, error: Optional[str] = None):
        self.label = label
        self.value = value
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    def __repr__(self):
        if self.ok:
            return f"ProbeResult({self.label!r}, value={self.value!r})"
        return f"ProbeResult({self.label!r}, error={self.error!r})"


class Probe:
    """Base class for all probes.

    Subclasses set ``name``, ``label`` and ``description`` and implement
    ``run()``, which returns the display value or raises ``ProbeError``.
    """

    name = "probe"
    label = "Probe"
    description = "Probe"

    # Printed as the line value instead of an error line when set
    default = None

    def __init__(self, timeout: int = COMMAND_TIMEOUT):
        self.timeout = timeout

    def run(self) -> str:
        """Gather the information and return it as a display string."""
        raise NotImplementedError("Subclasses must implement this method")

    def collect(self) -> ProbeResult:
        """Run the probe and wrap the outcome in a ProbeResult."""
        logger.debug(f"Running probe: {self.name}")
        try:
            return ProbeResult(self.label, value=self.run())
        except (ProbeError, OSError) as e:
            logger.warning(f"Probe {self.name} failed: {e}")
            return ProbeResult(self.label, error=str(e))

    def run_command(self, command: List[str], check: bool = False) -> str:
        """
        Run a command and return its standard output.

        Args:
            command: Command to run as a list of strings
            check: Treat a non-zero exit status as a failure

        Returns:
            Command output as string

        Raises:
            CommandError: the command could not be spawned, timed out,
                or exited non-zero while ``check`` is set
        """
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired:
            raise CommandError(f"Command {' '.join(command)} timed out after {self.timeout} seconds")
        except OSError as e:
            raise CommandError(f"Failed to run command {' '.join(command)}: {e}") from e

        if check and result.returncode != 0:
            raise CommandError(
                f"Command {' '.join(command)} exited with status {result.returncode}: "
                f"{result.stderr.strip()}"
            )
        return result.stdout

    def read_file(self, file_path: str) -> str:
        """
        Read a text file.

        Raises:
            NotFoundError: the file does not exist
            CommandError: the file exists but could not be read
        """
        try:
            with open(file_path, "r", errors="replace") as f:
                return f.read()
        except FileNotFoundError:
            raise NotFoundError(f"File not found: {file_path}")
        except PermissionError:
            raise CommandError(f"Permission denied: {file_path}")
        except OSError as e:
            raise CommandError(f"Failed to read file {file_path}: {e}") from e
