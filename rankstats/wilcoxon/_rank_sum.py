"""
Wilcoxon rank-sum statistics from two ordered samples.

RankSum merges two sorted samples in one linear pass, assigning midranks
to ties across both samples, and keeps only what the large-sample normal
approximation needs: the sample sizes, W (the rank sum of Y) and the tie
term sum((t-1) t (t+1)) over distinct combined values.

Conventions follow Hollander, Wolfe & Chicken, Nonparametric Statistical
Methods, 3rd ed., Section 4.1. R's wilcox.test() reports r_w() as W.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from numpy.typing import ArrayLike

from rankstats.core.exceptions import (
    EmptySampleError,
    ExcessiveTiesError,
    OrderingError,
    RankSumInvariantError,
    ValidationError,
)
from rankstats.core.hypothesis import AltHyp, HypTestResult
from rankstats.core.iter import iter_with_counts
from rankstats.core.validation import check_1d, check_alpha, check_array
from rankstats.normal import z_to_p

# Tie-corrected variances at or below this fraction of the uncorrected
# variance are round-off from a fully tied sample.
_TIE_VARIANCE_RTOL = 1e-12


class _MergeState(Enum):
    BOTH_ACTIVE = "both_active"
    ONLY_X_LEFT = "only_x_left"
    ONLY_Y_LEFT = "only_y_left"
    EXHAUSTED = "exhausted"


class _GroupCursor:
    """
    Forward-only cursor over a grouped sample.

    `head` is the current (value, count) group, or None once exhausted.
    Every advance checks that values strictly increase between groups.
    """

    __slots__ = ('_groups', '_sample', 'head', 'n')

    def __init__(self, groups: Iterable[tuple[float, int]], sample: str):
        self._groups = iter(groups)
        self._sample = sample
        self.head: tuple[float, int] | None = None
        self.n = 0
        self.advance()

    def advance(self) -> None:
        item = next(self._groups, None)
        if item is not None:
            value, count = item
            if value != value:
                raise OrderingError(
                    f"{self._sample}: NaN cannot be ordered",
                    sample=self._sample, current=value,
                )
            if self.head is not None and not (self.head[0] < value):
                prev = self.head[0]
                raise OrderingError(
                    f"{self._sample}: values must be in non-decreasing order, "
                    f"got {value!r} after {prev!r}",
                    sample=self._sample, previous=prev, current=value,
                )
            if (
                isinstance(count, bool)
                or not isinstance(count, numbers.Real)
                or not math.isfinite(count)
                or count < 1
                or int(count) != count
            ):
                raise ValidationError(
                    f"{self._sample}: group counts must be positive integers, "
                    f"got {count!r} for value {value!r}"
                )
            item = (value, int(count))
        self.head = item


class _RankAccumulator:
    """Running rank boundary and tie term shared by both cursors."""

    __slots__ = ('prev_rank', 'ties_sum_prod')

    def __init__(self):
        self.prev_rank = 0.0
        self.ties_sum_prod = 0

    def consume(self, *cursors: _GroupCursor) -> list[float]:
        """
        Rank the head groups of `cursors` as one cohort and advance them.

        All heads share one value. They receive the same midrank, the
        rank boundary moves past the whole cohort and the tie term is
        added once for the combined multiplicity.

        Returns the rank-sum contribution for each cursor, in order.
        """
        count = sum(c.head[1] for c in cursors)
        rank = self.prev_rank + (count + 1) / 2.0
        contributions = []
        for cursor in cursors:
            count_i = cursor.head[1]
            contributions.append(count_i * rank)
            cursor.n += count_i
            cursor.advance()
        self.prev_rank += count
        self.ties_sum_prod += (count - 1) * count * (count + 1)
        return contributions


def _merge_state(cx: _GroupCursor, cy: _GroupCursor) -> _MergeState:
    if cx.head is not None and cy.head is not None:
        return _MergeState.BOTH_ACTIVE
    if cx.head is not None:
        return _MergeState.ONLY_X_LEFT
    if cy.head is not None:
        return _MergeState.ONLY_Y_LEFT
    return _MergeState.EXHAUSTED


@dataclass(frozen=True)
class RankSum:
    """
    Wilcoxon rank-sum statistics for samples X and Y.

    Build with from_iters_with_counts(), from_iters() or from_arrays();
    all derived quantities are pure functions of these four fields.

    Attributes
    ----------
    n_x, n_y : int
        Sample sizes.
    w : float
        Wilcoxon rank sum W: sum of the midranks of Y in the combined
        ranking of X and Y.
    ties_sum_prod : int
        Sum over distinct combined values of (t-1) t (t+1), with t the
        value's multiplicity across both samples.
    """
    n_x: int
    n_y: int
    w: float
    ties_sum_prod: int

    # --- Construction ---

    @classmethod
    def from_iters_with_counts(
        cls,
        itc_x: Iterable[tuple[float, int]],
        itc_y: Iterable[tuple[float, int]],
    ) -> RankSum:
        """
        Merge two grouped samples.

        Each iterable yields (value, count) pairs with values strictly
        increasing, e.g. the output of iter_with_counts() on sorted data.
        Both are consumed lazily and exactly once.

        Raises:
            OrderingError: If a value does not exceed the previous value
                from the same sample
            ValidationError: If a count is not a positive integer
        """
        cx = _GroupCursor(itc_x, "x")
        cy = _GroupCursor(itc_y, "y")
        acc = _RankAccumulator()
        rank_sum_x = 0.0
        rank_sum_y = 0.0

        state = _merge_state(cx, cy)
        while state is not _MergeState.EXHAUSTED:
            if state is _MergeState.ONLY_X_LEFT:
                rank_sum_x += acc.consume(cx)[0]
            elif state is _MergeState.ONLY_Y_LEFT:
                rank_sum_y += acc.consume(cy)[0]
            elif cx.head[0] < cy.head[0]:
                rank_sum_x += acc.consume(cx)[0]
            elif cy.head[0] < cx.head[0]:
                rank_sum_y += acc.consume(cy)[0]
            else:
                sx, sy = acc.consume(cx, cy)
                rank_sum_x += sx
                rank_sum_y += sy
            state = _merge_state(cx, cy)

        _check_rank_sums(cx.n, cy.n, rank_sum_x, rank_sum_y)

        return cls(
            n_x=cx.n,
            n_y=cy.n,
            w=rank_sum_y,
            ties_sum_prod=acc.ties_sum_prod,
        )

    @classmethod
    def from_iters(cls, it_x: Iterable[float], it_y: Iterable[float]) -> RankSum:
        """
        Merge two samples given as iterables in non-decreasing order.

        Raises:
            OrderingError: If a sample is not in non-decreasing order
        """
        return cls.from_iters_with_counts(iter_with_counts(it_x), iter_with_counts(it_y))

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> RankSum:
        """
        Merge two 1D array-likes sorted in non-decreasing order.

        The arrays are not sorted here; pass np.sort(x) if needed.

        Raises:
            ValidationError: If an input is not numeric
            DimensionError: If an input is not 1D
            OrderingError: If an input is not in non-decreasing order
        """
        x_arr = check_array(x, "x")
        y_arr = check_array(y, "y")
        check_1d(x_arr, "x")
        check_1d(y_arr, "y")
        return cls.from_iters(x_arr.tolist(), y_arr.tolist())

    # --- Rank statistics ---

    def r_w(self) -> float:
        """W as reported by R's wilcox.test(x, y): Mann-Whitney U of X."""
        return self.mann_whitney_u_x()

    def mann_whitney_u_y(self) -> float:
        """Mann-Whitney U of Y: number of (x, y) pairs with y ranked above x, ties counting 1/2."""
        n_y = float(self.n_y)
        return self.w - n_y * (n_y + 1.0) / 2.0

    def mann_whitney_u_x(self) -> float:
        """Mann-Whitney U of X: number of (x, y) pairs with x ranked above y, ties counting 1/2."""
        return float(self.n_x) * float(self.n_y) - self.mann_whitney_u_y()

    def mann_whitney_u(self) -> float:
        """Mann-Whitney U: the smaller of mann_whitney_u_x() and mann_whitney_u_y()."""
        return min(self.mann_whitney_u_x(), self.mann_whitney_u_y())

    # --- Large-sample normal approximation ---

    def z(self) -> float:
        """
        z-score of the large-sample normal approximation, with tie
        correction and without continuity correction.

        Positive when X tends to be larger than Y.

        Raises:
            EmptySampleError: If n_x == 0 or n_y == 0
            ExcessiveTiesError: If the tie-corrected variance is not
                positive (e.g. every observation tied)
        """
        if self.n_x == 0 or self.n_y == 0:
            raise EmptySampleError(
                f"both samples must be non-empty, got n_x={self.n_x}, n_y={self.n_y}",
                n_x=self.n_x, n_y=self.n_y,
            )

        n_x = float(self.n_x)
        n_y = float(self.n_y)
        n = n_x + n_y
        e0_w = n_y * (n + 1.0) / 2.0
        var0_base = n_x * n_y * (n + 1.0) / 12.0
        var0_ties_adjust = n_x * n_y * float(self.ties_sum_prod) / (12.0 * n * (n - 1.0))
        var0 = var0_base - var0_ties_adjust
        if var0 <= var0_base * _TIE_VARIANCE_RTOL:
            raise ExcessiveTiesError(
                f"too many rank ties: tie-corrected variance is {var0!r}",
                variance=var0, ties_sum_prod=self.ties_sum_prod,
            )

        return -(self.w - e0_w) / math.sqrt(var0)

    def p(self, alt_hyp: AltHyp | str) -> float:
        """
        p-value of the large-sample normal approximation (no continuity
        correction).

        Raises:
            EmptySampleError, ExcessiveTiesError: As z()
            ValidationError: If alt_hyp is not a valid alternative
        """
        return z_to_p(self.z(), alt_hyp)

    def test(self, alt_hyp: AltHyp | str, alpha: float) -> HypTestResult:
        """
        Rank-sum test using the large-sample normal approximation.

        Parameters
        ----------
        alt_hyp : AltHyp or str
            Alternative hypothesis; LT means X tends to be smaller than Y.
        alpha : float
            Significance level in (0, 1).

        Raises:
            InvalidAlphaError: If alpha not in (0, 1)
            EmptySampleError, ExcessiveTiesError: As z()
        """
        alpha = check_alpha(alpha)
        alt_hyp = AltHyp.from_alternative(alt_hyp)
        return HypTestResult(self.p(alt_hyp), alpha, alt_hyp)


def _check_rank_sums(n_x: int, n_y: int, rank_sum_x: float, rank_sum_y: float) -> None:
    """Both rank sums must add up to 1 + 2 + ... + (n_x + n_y)."""
    n = float(n_x + n_y)
    expected_rank_sum_x = (1.0 + n) * n / 2.0 - rank_sum_y
    if not math.isclose(rank_sum_x, expected_rank_sum_x, rel_tol=1e-12, abs_tol=1e-9):
        raise RankSumInvariantError(
            f"rank sum of x is {rank_sum_x!r}, expected {expected_rank_sum_x!r}",
            rank_sum_x=rank_sum_x,
            expected_rank_sum_x=expected_rank_sum_x,
        )
