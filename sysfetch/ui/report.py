#!/usr/bin/env python3
"""
Report Generator for sysfetch.
"""

import sys
import logging
from typing import List, TextIO

from ..modules.base import Probe, ProbeResult

logger = logging.getLogger("sysfetch.report")


class ReportGenerator:
    """Runs probes in order and formats one line per probe."""

    def __init__(self, probes: List[Probe]):
        self.probes = probes

    def collect(self) -> List[ProbeResult]:
        """Run every probe, never letting one failure stop the others."""
        results = []
        for probe in self.probes:
            try:
                results.append(probe.collect())
            except Exception as e:
                logger.exception(f"Unexpected error running probe {probe.name}")
                results.append(ProbeResult(probe.label, error=str(e) or type(e).__name__))
        return results

    def generate(self) -> List[str]:
        """Generate the report lines."""
        return [
            self.format_line(probe, result)
            for probe, result in zip(self.probes, self.collect())
        ]

    @staticmethod
    def format_line(probe: Probe, result: ProbeResult) -> str:
        """Format a result as ``<Label>: <value>`` or the probe's fallback line."""
        if result.ok:
            return f"{result.label}: {result.value}"
        if probe.default is not None:
            return f"{result.label}: {probe.default}"
        return f"Error detecting {probe.description}."

    def print_report(self, stream: TextIO = None):
        """Write the report to standard output."""
        stream = stream or sys.stdout
        for line in self.generate():
            print(line, file=stream)
