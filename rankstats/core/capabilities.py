"""
Capability string constants for rankstats.

This module is the SINGLE SOURCE OF TRUTH for capability strings.
Import from here, never use raw strings.

Usage:
    from rankstats.core.capabilities import CAPABILITY_MATERIALIZED

    if design.supports(CAPABILITY_MATERIALIZED):
        x, y = design.x, design.y
"""

# Data is held as full numpy arrays in memory
CAPABILITY_MATERIALIZED = 'materialized'

# Data can be yielded lazily (single pass)
CAPABILITY_STREAMING = 'streaming'

# Data can be iterated multiple times
CAPABILITY_REPEATABLE = 'repeatable'
