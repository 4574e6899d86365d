#!/usr/bin/env python3
"""
sysfetch

Prints a short summary of a Linux host: distribution, kernel, uptime,
hostname, memory, display protocol, shell, desktop, GPU, CPU and packages.
"""

__version__ = "1.0.0"
