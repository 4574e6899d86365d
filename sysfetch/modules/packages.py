#!/usr/bin/env python3
"""
Installed package counts per package manager.
"""

import logging
import shutil
from typing import List, Optional, Tuple

from .base import Probe, NotFoundError, CommandError, COMMAND_TIMEOUT

logger = logging.getLogger("sysfetch")

# (display name, listing command printing one package per line)
PACKAGE_MANAGERS = [
    ("rpm", ["rpm", "-qa"]),
    ("dpkg", ["dpkg-query", "-f", "${binary:Package}\n", "-W"]),
    ("pacman", ["pacman", "-Qq"]),
    ("flatpak", ["flatpak", "list", "--columns=application"]),
]


class PackagesProbe(Probe):
    """Number of installed packages for every available package manager."""

    name = "packages"
    label = "Packages"
    description = "installed packages"

    def __init__(self, managers: Optional[List[Tuple[str, List[str]]]] = None,
                 timeout: int = COMMAND_TIMEOUT):
        super().__init__(timeout=timeout)
        self.managers = PACKAGE_MANAGERS if managers is None else managers

    def run(self) -> str:
        counts = []
        for manager, command in self.managers:
            if shutil.which(command[0]) is None:
                logger.debug(f"Package manager {manager} not installed")
                continue
            try:
                output = self.run_command(command, check=True)
            except CommandError as e:
                logger.warning(f"Skipping {manager} package count: {e}")
                continue
            counts.append(f"{count_packages(output)} ({manager})")

        if not counts:
            raise NotFoundError("No supported package manager found")
        return ", ".join(counts)


def count_packages(output: str) -> int:
    """Count non-empty lines of a package listing."""
    return sum(1 for line in output.splitlines() if line.strip())
