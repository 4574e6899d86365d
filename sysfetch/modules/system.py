#!/usr/bin/env python3
"""
Operating system, kernel and hardware probes.
"""

import logging
import platform

from .base import Probe, NotFoundError, CommandError, COMMAND_TIMEOUT

logger = logging.getLogger("sysfetch")

OS_RELEASE_PATH = "/etc/os-release"
CPUINFO_PATH = "/proc/cpuinfo"
MEMINFO_PATH = "/proc/meminfo"
UPTIME_PATH = "/proc/uptime"


class OSProbe(Probe):
    """Distribution pretty name followed by the machine architecture."""

    name = "os"
    label = "OS"
    description = "OS"
    default = "Unknown OS"

    def __init__(self, os_release_path: str = OS_RELEASE_PATH):
        super().__init__()
        self.os_release_path = os_release_path

    def run(self) -> str:
        distro = self.detect_distro()
        return f"{distro} {platform.machine()}"

    def detect_distro(self) -> str:
        content = self.read_file(self.os_release_path)
        for line in content.splitlines():
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            if key.strip() == "PRETTY_NAME":
                return value.strip().strip('"').strip("'")
        raise NotFoundError(f"PRETTY_NAME not found in {self.os_release_path}")


class KernelProbe(Probe):
    """Kernel release without the package release and architecture suffix."""

    name = "kernel"
    label = "Kernel"
    description = "Kernel Version"

    def run(self) -> str:
        release = platform.release()
        if not release:
            raise NotFoundError("Kernel release is not available")
        return clean_kernel_release(release)


def clean_kernel_release(release: str) -> str:
    """Cut a kernel release string at its first hyphen."""
    return release.split("-", 1)[0]


class UptimeProbe(Probe):
    """Human readable uptime, from ``uptime -p`` or /proc/uptime."""

    name = "uptime"
    label = "Uptime"
    description = "Uptime"

    def __init__(self, uptime_path: str = UPTIME_PATH, timeout: int = COMMAND_TIMEOUT):
        super().__init__(timeout=timeout)
        self.uptime_path = uptime_path

    def run(self) -> str:
        try:
            uptime = self.run_command(["uptime", "-p"], check=True).strip()
        except CommandError as e:
            # busybox uptime has no -p
            logger.debug(f"Falling back to {self.uptime_path}: {e}")
            uptime = ""
        if uptime:
            return uptime

        content = self.read_file(self.uptime_path)
        try:
            seconds = float(content.split()[0])
        except (IndexError, ValueError):
            raise NotFoundError(f"Malformed uptime data in {self.uptime_path}")
        return format_uptime(seconds)


def format_uptime(seconds: float) -> str:
    """Render seconds the way ``uptime -p`` does, e.g. ``up 2 hours, 14 minutes``."""
    minutes_total = int(seconds) // 60
    weeks, remainder = divmod(minutes_total, 7 * 24 * 60)
    days, remainder = divmod(remainder, 24 * 60)
    hours, minutes = divmod(remainder, 60)

    parts = []
    for amount, unit in ((weeks, "week"), (days, "day"), (hours, "hour"), (minutes, "minute")):
        if amount:
            parts.append(f"{amount} {unit}{'s' if amount != 1 else ''}")
    if not parts:
        parts.append("0 minutes")
    return "up " + ", ".join(parts)


class HostnameProbe(Probe):
    name = "hostname"
    label = "Host"
    description = "Hostname"

    def run(self) -> str:
        hostname = platform.node()
        if not hostname:
            raise NotFoundError("Hostname is not set")
        return hostname


class MemoryProbe(Probe):
    """Free and total physical memory in MiB."""

    name = "memory"
    label = "Memory"
    description = "Memory"

    def __init__(self, meminfo_path: str = MEMINFO_PATH):
        super().__init__()
        self.meminfo_path = meminfo_path

    def run(self) -> str:
        fields = {}
        for line in self.read_file(self.meminfo_path).splitlines():
            if ":" not in line:
                continue
            key, value = line.split(":", 1)
            fields[key.strip()] = value.split()

        try:
            free_kb = int(fields["MemFree"][0])
            total_kb = int(fields["MemTotal"][0])
        except (KeyError, IndexError, ValueError):
            raise NotFoundError(f"MemFree/MemTotal not found in {self.meminfo_path}")

        return f"{free_kb // 1024}MiB / {total_kb // 1024}MiB"


class CPUProbe(Probe):
    """CPU model name and logical core count from /proc/cpuinfo."""

    name = "cpu"
    label = "CPU"
    description = "CPU"

    def __init__(self, cpuinfo_path: str = CPUINFO_PATH):
        super().__init__()
        self.cpuinfo_path = cpuinfo_path

    def run(self) -> str:
        content = self.read_file(self.cpuinfo_path)

        model = ""
        cores = 0
        for line in content.splitlines():
            # Last model name wins
            if line.startswith("model name"):
                model = line.split(":", 1)[1].strip() if ":" in line else ""
            elif line.startswith("processor"):
                cores += 1

        return f"{model} ({cores} cores)"
