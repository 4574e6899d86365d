#!/usr/bin/env python3
"""
Module initialization - imports all probes and provides a function to get all probe instances.
"""

from .base import Probe, ProbeResult, ProbeError, NotFoundError, CommandError

from .system import OSProbe, KernelProbe, UptimeProbe, HostnameProbe, MemoryProbe, CPUProbe
from .desktop import DisplayProtocolProbe, ShellProbe, DesktopEnvironmentProbe, GPUProbe
from .packages import PackagesProbe


def get_all_probes():
    """Return a list of all probe instances in output order."""
    return [
        # Host
        OSProbe(),
        KernelProbe(),
        UptimeProbe(),
        HostnameProbe(),
        MemoryProbe(),

        # Session
        DisplayProtocolProbe(),
        ShellProbe(),
        DesktopEnvironmentProbe(),

        # Hardware
        GPUProbe(),
        CPUProbe(),

        # Software
        PackagesProbe()
    ]
