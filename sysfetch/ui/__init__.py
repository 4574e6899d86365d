#!/usr/bin/env python3
"""
UI module initialization for sysfetch.
"""

from .report import ReportGenerator
