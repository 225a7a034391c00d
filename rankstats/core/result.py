"""
Generic result container for all rankstats computations.

The Result class provides a standardized envelope that domain-specific
results use. This enables shared tooling for timing, diagnostics and
reproducibility while allowing domains to define their own parameter
structures.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (test type, tie diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (statistics, p-values, etc.)
        info: Structured metadata (test type, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=RankSumParams(...),
        ...     info={'test_type': 'wilcox_rank_sum', 'has_ties': False},
        ...     timing={'total_seconds': 0.001, 'merge': 0.0008},
        ...     backend_name='cpu_rank_sum'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
