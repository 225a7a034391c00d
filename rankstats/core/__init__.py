"""
Core infrastructure for rankstats.

This module provides shared abstractions and utilities used by the
domain-specific submodules.

Key components:
    protocols: DataSource, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    hypothesis: AltHyp, Hyp, HypTestResult, Ci
    iter: Grouping of sorted samples into (value, count) runs
    aok: Coerce-or-fallback adapter
"""

from rankstats.core.protocols import DataSource, Backend
from rankstats.core.result import Result
from rankstats.core.exceptions import (
    RankStatsError,
    ValidationError,
    DimensionError,
    OrderingError,
    EmptySampleError,
    InvalidAlphaError,
    NumericalError,
    ExcessiveTiesError,
    RankSumInvariantError,
)
from rankstats.core.hypothesis import (
    AltHyp,
    Hyp,
    HypTestResult,
    Ci,
    PositionWrtCi,
)
from rankstats.core.iter import iter_with_counts
from rankstats.core.aok import aok, fallback_for, register_fallback

__all__ = [
    # Protocols
    "DataSource",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "RankStatsError",
    "ValidationError",
    "DimensionError",
    "OrderingError",
    "EmptySampleError",
    "InvalidAlphaError",
    "NumericalError",
    "ExcessiveTiesError",
    "RankSumInvariantError",
    # Hypothesis vocabulary
    "AltHyp",
    "Hyp",
    "HypTestResult",
    "Ci",
    "PositionWrtCi",
    # Iteration
    "iter_with_counts",
    # Fallback coercion
    "aok",
    "fallback_for",
    "register_fallback",
]
