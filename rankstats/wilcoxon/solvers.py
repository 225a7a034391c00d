"""
Solver dispatch for the Wilcoxon rank-sum test.

Provides rank_sum_test(), the array-level entry point. The streaming
entry point is RankSum itself.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from rankstats.core.exceptions import ValidationError
from rankstats.core.hypothesis import AltHyp
from rankstats.wilcoxon.backends.cpu import CPURankSumBackend
from rankstats.wilcoxon.design import RankSumDesign
from rankstats.wilcoxon.solution import RankSumSolution


def _get_backend(backend: str = 'cpu'):
    """
    Select backend for the rank-sum test.

    The merge is a single sequential pass, so CPU is the only backend.
    """
    if backend in ('cpu', 'auto'):
        return CPURankSumBackend()
    raise ValidationError(
        f"Unknown backend: {backend!r}. Use 'cpu'."
    )


def rank_sum_test(
    x: ArrayLike | RankSumDesign,
    y: ArrayLike | None = None,
    *,
    alternative: AltHyp | str = "two.sided",
    alpha: float = 0.05,
    presorted: bool = False,
    backend: str = 'cpu',
) -> RankSumSolution:
    """
    Wilcoxon rank-sum (Mann-Whitney U) test, large-sample normal
    approximation with tie correction and no continuity correction.

    Matches R wilcox.test(x, y, exact=FALSE, correct=FALSE).

    Parameters
    ----------
    x : array-like or RankSumDesign
        First sample, or a pre-built design.
    y : array-like or None
        Second sample. Required unless x is a RankSumDesign.
    alternative : AltHyp or str
        "two.sided" (default), "less" or "greater". "less" means x tends
        to be smaller than y.
    alpha : float
        Significance level for the accept/reject decision. Default 0.05.
    presorted : bool
        If True, x and y must already be in non-decreasing order and are
        not sorted again.
    backend : str
        'cpu' (default).

    Returns
    -------
    RankSumSolution
        W, U statistics, z, p_value and the decision at level alpha.

    Raises
    ------
    OrderingError
        presorted=True and a sample is out of order.
    EmptySampleError
        Either sample is empty.
    ExcessiveTiesError
        Ties leave no variance (e.g. all observations equal).
    """
    if isinstance(x, RankSumDesign):
        design = x
    else:
        if y is None:
            raise ValidationError("y is required for rank_sum_test")
        design = RankSumDesign.from_samples(
            x, y,
            alternative=alternative,
            alpha=alpha,
            presorted=presorted,
        )

    be = _get_backend(backend)
    result = be.solve(design)
    return RankSumSolution(_result=result, _design=design)
