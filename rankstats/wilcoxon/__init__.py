"""
Wilcoxon rank-sum (Mann-Whitney U) test.

Public API:
    RankSum              - one-pass rank-sum statistics from ordered samples
    rank_sum_test(x, y)  - array-level test matching
                           R wilcox.test(x, y, exact=FALSE, correct=FALSE)
"""

from rankstats.wilcoxon._rank_sum import RankSum
from rankstats.wilcoxon._common import RankSumParams
from rankstats.wilcoxon.design import RankSumDesign
from rankstats.wilcoxon.solution import RankSumSolution
from rankstats.wilcoxon.solvers import rank_sum_test

__all__ = [
    "RankSum",
    "RankSumParams",
    "RankSumDesign",
    "RankSumSolution",
    "rank_sum_test",
]
