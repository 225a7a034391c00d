"""
rankstats: nonparametric two-sample location tests for Python.

Computes the Wilcoxon rank-sum / Mann-Whitney U test from two ordered
samples in a single linear pass, with tie-corrected large-sample normal
approximation.

Submodules:
    wilcoxon: RankSum statistics and rank_sum_test()
    normal: Normal and Student-t tail lookups
    core: Shared types, errors, validation and result envelope
"""

__version__ = "0.1.0"

from rankstats import core
from rankstats import normal
from rankstats import wilcoxon
from rankstats.core import (
    AltHyp,
    Hyp,
    HypTestResult,
    Ci,
    PositionWrtCi,
    RankStatsError,
    iter_with_counts,
    aok,
)
from rankstats.normal import z_to_p, t_to_p, z_alpha, t_alpha
from rankstats.wilcoxon import RankSum, rank_sum_test

__all__ = [
    "__version__",
    "core",
    "normal",
    "wilcoxon",
    "AltHyp",
    "Hyp",
    "HypTestResult",
    "Ci",
    "PositionWrtCi",
    "RankStatsError",
    "iter_with_counts",
    "aok",
    "z_to_p",
    "t_to_p",
    "z_alpha",
    "t_alpha",
    "RankSum",
    "rank_sum_test",
]
