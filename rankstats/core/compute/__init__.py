"""
Shared compute infrastructure for rankstats.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared infrastructure only.

Submodules:
    timing: Execution timing utilities
"""

from rankstats.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
