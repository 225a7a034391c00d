"""
Exception hierarchy for rankstats.

All user-triggerable exceptions inherit from RankStatsError to allow
catching any library-specific error. Domain-specific exceptions should
inherit from the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
    - Internal defects are NOT RankStatsError (see RankSumInvariantError)
"""


class RankStatsError(Exception):
    """Base exception for all rankstats errors."""
    pass


class ValidationError(RankStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when an array's shape doesn't match the expected dimensions.
    """
    pass


class OrderingError(ValidationError):
    """
    A sample is not in non-decreasing order.

    Raised by the rank-sum merge as soon as a grouped sample yields a
    value that is not strictly greater than the previous group's value.
    The merge does not sort; callers retry with sorted input.

    Attributes:
        sample: Name of the offending sample ('x' or 'y')
        previous: Value of the previous group
        current: Value that broke the ordering
    """

    def __init__(
        self,
        message: str,
        sample: str | None = None,
        previous: float | None = None,
        current: float | None = None,
    ):
        super().__init__(message)
        self.sample = sample
        self.previous = previous
        self.current = current


class EmptySampleError(ValidationError):
    """
    A sample has no observations.

    Raised when a statistic needs both samples to be non-empty
    (e.g. the rank-sum variance under H0).

    Attributes:
        n_x: Size of the first sample
        n_y: Size of the second sample
    """

    def __init__(self, message: str, n_x: int | None = None, n_y: int | None = None):
        super().__init__(message)
        self.n_x = n_x
        self.n_y = n_y


class InvalidAlphaError(ValidationError):
    """
    Significance level outside the open interval (0, 1).

    Attributes:
        alpha: The rejected value
    """

    def __init__(self, message: str, alpha: float | None = None):
        super().__init__(message)
        self.alpha = alpha


class NumericalError(RankStatsError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class ExcessiveTiesError(NumericalError):
    """
    Tie-corrected rank-sum variance is not positive.

    Happens when so many observations share ranks that the null
    variance collapses (e.g. every observation in both samples tied).

    Attributes:
        variance: The tie-corrected variance that was rejected
        ties_sum_prod: Accumulated tie term sum((t-1) t (t+1))
    """

    def __init__(
        self,
        message: str,
        variance: float | None = None,
        ties_sum_prod: int | None = None,
    ):
        super().__init__(message)
        self.variance = variance
        self.ties_sum_prod = ties_sum_prod


class RankSumInvariantError(AssertionError):
    """
    The rank-sum cross-check failed after a merge.

    Signals a defect in the merge, not a usage error. Deliberately not a
    RankStatsError so that fallback coercion never hides it.

    Attributes:
        rank_sum_x: Rank sum of X accumulated by the merge
        expected_rank_sum_x: Rank sum of X implied by W and the sizes
    """

    def __init__(
        self,
        message: str,
        rank_sum_x: float | None = None,
        expected_rank_sum_x: float | None = None,
    ):
        super().__init__(message)
        self.rank_sum_x = rank_sum_x
        self.expected_rank_sum_x = expected_rank_sum_x
