#!/usr/bin/env python3
"""
Session, desktop and graphics probes.
"""

import os

from .base import Probe, NotFoundError

GPU_MARKER = "VGA compatible controller"


class DisplayProtocolProbe(Probe):
    """Wayland if WAYLAND_DISPLAY is set, otherwise X11 if DISPLAY is set."""

    name = "display_protocol"
    label = "WM"
    description = "Display Protocol"

    def run(self) -> str:
        if os.environ.get("WAYLAND_DISPLAY"):
            return "Wayland"
        if os.environ.get("DISPLAY"):
            return "X11"
        raise NotFoundError("Neither WAYLAND_DISPLAY nor DISPLAY is set")


class EnvironmentProbe(Probe):
    """Reports an environment variable verbatim."""

    variable = ""

    def run(self) -> str:
        value = os.environ.get(self.variable)
        if value is None:
            raise NotFoundError(f"{self.variable} is not set")
        return value


class ShellProbe(EnvironmentProbe):
    name = "shell"
    label = "Shell"
    description = "Shell"
    variable = "SHELL"


class DesktopEnvironmentProbe(EnvironmentProbe):
    name = "desktop_environment"
    label = "DE"
    description = "Desktop Environment"
    variable = "XDG_CURRENT_DESKTOP"


class GPUProbe(Probe):
    """First VGA controller reported by ``lspci -nn``."""

    name = "gpu"
    label = "GPU"
    description = "GPU"

    def run(self) -> str:
        output = self.run_command(["lspci", "-nn"])
        for line in output.splitlines():
            if GPU_MARKER in line:
                return clean_gpu_line(line)
        raise NotFoundError("No VGA compatible controller found")


def clean_gpu_line(line: str) -> str:
    """Drop the bus address and the device class label from an lspci line.

    The class label is the multi-word GPU_MARKER, so it is cut as a unit
    rather than as a single token.

    >>> clean_gpu_line("00:02.0 VGA compatible controller [0300]: Intel Corporation UHD [8086:9bc4]")
    '[0300]: Intel Corporation UHD [8086:9bc4]'
    """
    tokens = line.split()[1:]
    rest = " ".join(tokens)
    if rest.startswith(GPU_MARKER):
        rest = rest[len(GPU_MARKER):]
    return rest.strip()
