"""
Tests for RankSum, the one-pass rank-sum merge and its statistics.

Reference p-values from R:
    wilcox.test(x, y, exact=FALSE, correct=FALSE, alternative=...)
Book values: Hollander, Wolfe & Chicken, Nonparametric Statistical
Methods, 3rd ed., Example 4.1.
"""

import math

import numpy as np
import pytest
from scipy import stats as sp_stats

from rankstats.core.hypothesis import AltHyp, Hyp
from rankstats.core.iter import iter_with_counts
from rankstats.wilcoxon import RankSum

ALPHA = 0.05
EPSILON = 0.0005


def reference_rank_sums(x, y):
    """Rank sums and tie term from a full combined ranking."""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    ranks = sp_stats.rankdata(np.concatenate([x, y]), method='average')
    _, counts = np.unique(np.concatenate([x, y]), return_counts=True)
    ties = int(np.sum((counts - 1) * counts * (counts + 1)))
    return float(ranks[:len(x)].sum()), float(ranks[len(x):].sum()), ties


def pairwise_u_x(x, y):
    """Pairs with x above y, ties counting one half."""
    xa = np.asarray(x, dtype=float)[:, None]
    ya = np.asarray(y, dtype=float)[None, :]
    return float(np.sum(xa > ya) + 0.5 * np.sum(xa == ya))


def check_wilcoxon(rank_sum, alt_hyp, exp_r_w, exp_p, exp_accept_hyp):
    p = rank_sum.p(alt_hyp)
    res = rank_sum.test(alt_hyp, ALPHA)

    assert rank_sum.r_w() == pytest.approx(exp_r_w, abs=EPSILON)
    assert p == pytest.approx(exp_p, abs=EPSILON)
    assert res.p == p
    assert res.alpha == ALPHA
    assert res.alt_hyp is alt_hyp
    assert res.accepted == exp_accept_hyp


# ═══════════════════════════════════════════════════════════════════════
# Reference scenarios
# ═══════════════════════════════════════════════════════════════════════


class TestBookData:
    """Hollander, Wolfe & Chicken Example 4.1."""

    def test_w(self, book_data):
        rs = RankSum.from_iters(*book_data)
        assert rs.n_x == 10
        assert rs.n_y == 5
        assert rs.w == 30.0
        assert rs.ties_sum_prod == 0

    def test_u(self, book_data):
        rs = RankSum.from_iters(*book_data)
        assert rs.mann_whitney_u_x() == 35.0
        assert rs.mann_whitney_u_y() == 15.0
        assert rs.mann_whitney_u() == 15.0
        assert rs.r_w() == 35.0

    def test_z(self, book_data):
        rs = RankSum.from_iters(*book_data)
        assert rs.z() == pytest.approx(math.sqrt(1.5), rel=1e-12)

    @pytest.mark.parametrize("alt_hyp, exp_p", [
        (AltHyp.LT, 0.8897),
        (AltHyp.NE, 0.2207),
        (AltHyp.GT, 0.1103),
    ])
    def test_accepts_null(self, book_data, alt_hyp, exp_p):
        rs = RankSum.from_iters(*book_data)
        check_wilcoxon(rs, alt_hyp, 35.0, exp_p, Hyp.null())

    def test_from_arrays_matches(self, book_data):
        x, y = book_data
        assert RankSum.from_arrays(np.array(x), np.array(y)) == RankSum.from_iters(x, y)


class TestContrivedData:
    """Overlapping samples with ties shared across samples."""

    def test_u(self, contrived_data):
        rs = RankSum.from_iters(*contrived_data)
        assert rs.mann_whitney_u_x() == pytest.approx(1442.5, abs=EPSILON)
        assert rs.mann_whitney_u_y() == pytest.approx(1307.5, abs=EPSILON)
        assert rs.mann_whitney_u() == pytest.approx(1307.5, abs=EPSILON)

    @pytest.mark.parametrize("alt_hyp, exp_p", [
        (AltHyp.LT, 0.6675),
        (AltHyp.NE, 0.6649),
        (AltHyp.GT, 0.3325),
    ])
    def test_accepts_null(self, contrived_data, alt_hyp, exp_p):
        rs = RankSum.from_iters(*contrived_data)
        check_wilcoxon(rs, alt_hyp, 1442.5, exp_p, Hyp.null())

    @pytest.mark.parametrize("alt_hyp, exp_p, exp_accept_hyp", [
        (AltHyp.LT, 0.0002987, Hyp.alt(AltHyp.LT)),
        (AltHyp.NE, 0.0005974, Hyp.alt(AltHyp.NE)),
        (AltHyp.GT, 0.9997, Hyp.null()),
    ])
    def test_shifted_y(self, contrived_data, alt_hyp, exp_p, exp_accept_hyp):
        x, y = contrived_data
        rs = RankSum.from_iters(x, [v + 35.0 for v in y])
        check_wilcoxon(rs, alt_hyp, 840.0, exp_p, exp_accept_hyp)

    def test_matches_reference_ranking(self, contrived_data):
        x, y = contrived_data
        rs = RankSum.from_iters(x, y)
        rank_sum_x, rank_sum_y, ties = reference_rank_sums(x, y)
        assert rs.w == rank_sum_y
        assert rs.ties_sum_prod == ties
        n = rs.n_x + rs.n_y
        assert rank_sum_x + rs.w == (1 + n) * n / 2


# ═══════════════════════════════════════════════════════════════════════
# Merge mechanics
# ═══════════════════════════════════════════════════════════════════════


class TestMerge:

    def test_empty_both(self):
        rs = RankSum.from_iters([], [])
        assert (rs.n_x, rs.n_y, rs.w, rs.ties_sum_prod) == (0, 0, 0.0, 0)

    def test_only_x(self):
        rs = RankSum.from_iters([1., 2., 2.], [])
        assert (rs.n_x, rs.n_y, rs.w) == (3, 0, 0.0)
        assert rs.ties_sum_prod == 6

    def test_only_y(self):
        rs = RankSum.from_iters([], [1., 2., 3.])
        assert (rs.n_x, rs.n_y, rs.w) == (0, 3, 6.0)

    def test_joint_cohort_shares_midrank(self):
        """x=[1, 2], y=[2, 3]: the two 2s share rank 2.5."""
        rs = RankSum.from_iters([1., 2.], [2., 3.])
        assert rs.w == 2.5 + 4.0
        assert rs.ties_sum_prod == 6

    def test_tie_term_counted_once_per_value(self):
        """Value 2 has multiplicity 5 across samples: one (4)(5)(6) term."""
        rs = RankSum.from_iters([2., 2.], [2., 2., 2.])
        assert rs.ties_sum_prod == 120
        assert rs.w == 3 * 3.0

    def test_grouped_input(self):
        rs = RankSum.from_iters_with_counts([(1., 2), (4., 1)], [(1., 1), (3., 3)])
        assert rs == RankSum.from_iters([1., 1., 4.], [1., 3., 3., 3.])
        # 1s take ranks 1-3 (midrank 2), 3s take 4-6 (midrank 5)
        assert rs.w == 2.0 + 3 * 5.0
        assert rs.ties_sum_prod == 24 + 24

    def test_lazy_single_pass_generators(self):
        x = (v for v in [0.5, 1.5, 2.5])
        y = (v for v in [1.0, 2.0])
        rs = RankSum.from_iters(x, y)
        assert rs.w == 2.0 + 4.0
        assert next(x, None) is None

    def test_integer_values(self):
        rs = RankSum.from_iters([1, 3, 5], [2, 4, 6])
        assert rs.w == 12.0
        assert rs.r_w() == 3.0

    def test_immutable(self):
        rs = RankSum.from_iters([1.], [2.])
        with pytest.raises(AttributeError):
            rs.w = 0.0

    def test_iter_with_counts_roundtrip(self):
        x = [1., 1., 2., 5.]
        y = [1., 3.]
        assert RankSum.from_iters_with_counts(
            iter_with_counts(x), iter_with_counts(y)
        ) == RankSum.from_iters(x, y)


# ═══════════════════════════════════════════════════════════════════════
# Algebraic properties on random tied data
# ═══════════════════════════════════════════════════════════════════════


class TestProperties:

    @pytest.mark.parametrize("n_x, n_y, n_levels", [
        (1, 1, 3), (5, 7, 4), (20, 13, 6), (40, 60, 10), (100, 3, 5),
    ])
    def test_against_full_ranking(self, rng, n_x, n_y, n_levels):
        x = np.sort(rng.integers(0, n_levels, n_x)).astype(float)
        y = np.sort(rng.integers(0, n_levels, n_y)).astype(float)
        rs = RankSum.from_arrays(x, y)
        rank_sum_x, rank_sum_y, ties = reference_rank_sums(x, y)

        assert rs.n_x == n_x
        assert rs.n_y == n_y
        assert rs.w == pytest.approx(rank_sum_y)
        assert rs.ties_sum_prod == ties
        n = n_x + n_y
        assert rank_sum_x + rs.w == pytest.approx((1 + n) * n / 2)

    @pytest.mark.parametrize("n_x, n_y", [(3, 4), (15, 15), (31, 8)])
    def test_u_complement_and_bounds(self, rng, n_x, n_y):
        x = np.sort(rng.integers(0, 8, n_x)).astype(float)
        y = np.sort(rng.integers(0, 8, n_y)).astype(float)
        rs = RankSum.from_arrays(x, y)
        u_x = rs.mann_whitney_u_x()
        u_y = rs.mann_whitney_u_y()

        assert u_x + u_y == n_x * n_y
        assert 0.0 <= u_x <= n_x * n_y
        assert 0.0 <= u_y <= n_x * n_y
        assert u_x == pytest.approx(pairwise_u_x(x, y))
        assert rs.mann_whitney_u() == min(u_x, u_y)

    @pytest.mark.parametrize("alternative, alt_hyp", [
        ("two-sided", AltHyp.NE),
        ("less", AltHyp.LT),
        ("greater", AltHyp.GT),
    ])
    def test_p_matches_scipy_asymptotic(self, rng, alternative, alt_hyp):
        x = np.sort(rng.normal(0.3, 1.0, 40).round(1))
        y = np.sort(rng.normal(0.0, 1.0, 35).round(1))
        rs = RankSum.from_arrays(x, y)
        ref = sp_stats.mannwhitneyu(
            x, y, alternative=alternative, use_continuity=False, method='asymptotic'
        )
        assert rs.r_w() == pytest.approx(ref.statistic)
        assert rs.p(alt_hyp) == pytest.approx(ref.pvalue, rel=1e-9)


class TestShift:
    """Shifting X upward drives z up and the GT alternative to acceptance."""

    SHIFTS = [0.0, 10.0, 20.0, 40.0, 80.0]

    def test_monotone_in_shift(self, contrived_data):
        x, y = contrived_data
        zs = []
        p_ne = []
        p_gt = []
        for shift in self.SHIFTS:
            rs = RankSum.from_iters([v + shift for v in x], y)
            zs.append(rs.z())
            p_ne.append(rs.p(AltHyp.NE))
            p_gt.append(rs.p(AltHyp.GT))

        assert all(a < b for a, b in zip(zs, zs[1:]))
        assert all(a > b for a, b in zip(p_ne, p_ne[1:]))
        assert all(a > b for a, b in zip(p_gt, p_gt[1:]))

    def test_gt_accepted_after_shift(self, contrived_data):
        x, y = contrived_data
        before = RankSum.from_iters(x, y).test(AltHyp.GT, ALPHA)
        after = RankSum.from_iters([v + 40.0 for v in x], y).test(AltHyp.GT, ALPHA)
        assert before.accepted == Hyp.null()
        assert after.accepted == Hyp.alt(AltHyp.GT)

    def test_lt_accepted_after_downward_shift(self, contrived_data):
        x, y = contrived_data
        res = RankSum.from_iters([v - 40.0 for v in x], y).test(AltHyp.LT, ALPHA)
        assert res.accepted == Hyp.alt(AltHyp.LT)
