"""
Shared compute infrastructure for powerviz.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared numeric infrastructure.

Submodules:
    timing: Execution timing utilities
"""

from powerviz.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
