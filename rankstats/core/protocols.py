"""
Core protocols for rankstats.

These define structural interfaces that domain-specific implementations
must satisfy. We use Protocol (structural typing) rather than ABC
(nominal typing) to allow flexibility while maintaining type safety.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Capability-driven: use supports() for optional features
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # DataSource type


@runtime_checkable
class DataSource(Protocol):
    """
    Minimal protocol for any data container used in statistical computation.

    Domain-specific designs (e.g. RankSumDesign) implement this protocol
    and add their own accessors.
    """

    @property
    def n_observations(self) -> int:
        """Number of statistical units across all samples."""
        ...

    @property
    def metadata(self) -> dict[str, Any]:
        """
        Domain-specific metadata.

        Example:
            Rank-sum: {'n_x': 10, 'n_y': 5, 'presorted': False}
        """
        ...

    def supports(self, capability: str) -> bool:
        """
        Check if this data source supports a given capability.

        Capability strings live in rankstats.core.capabilities.

        Note:
            Unknown capabilities MUST return False, never raise.
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a domain-specific DataSource and produces a
    Result wrapping a domain-specific parameter payload. Backends are
    stateless: all configuration comes from the DataSource.

    Type Parameters:
        D: The DataSource type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_rank_sum'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the statistical computation.

        Raises:
            ValidationError: If design is invalid for this backend
            NumericalError: If numerical issues prevent a solution
        """
        ...
