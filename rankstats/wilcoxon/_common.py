"""
Common types for the rank-sum test pipeline.

Defines RankSumParams, the payload the CPU backend places in Result.
"""

from __future__ import annotations

from dataclasses import dataclass

from rankstats.core.hypothesis import AltHyp, HypTestResult


@dataclass(frozen=True)
class RankSumParams:
    """
    Parameter payload for the Wilcoxon rank-sum test.

    Attributes
    ----------
    n_x, n_y : int
        Sample sizes.
    w : float
        Rank sum of y in the combined ranking (Hollander-Wolfe W).
    r_w : float
        W as reported by R's wilcox.test(): Mann-Whitney U of x.
    u_x, u_y : float
        Mann-Whitney U of x and of y; u_x + u_y == n_x * n_y.
    u : float
        min(u_x, u_y).
    ties_sum_prod : int
        Tie term sum((t-1) t (t+1)) over distinct combined values.
    z : float
        Normal-approximation z-score, tie corrected, no continuity
        correction.
    p_value : float
        p-value for `alternative`.
    alternative : AltHyp
        Alternative hypothesis.
    alpha : float
        Significance level used for `test`.
    test : HypTestResult
        Verdict at level alpha.
    method : str
        Human-readable method name.
    data_name : str
        Description of the data, e.g. "x and y".
    """
    n_x: int
    n_y: int
    w: float
    r_w: float
    u_x: float
    u_y: float
    u: float
    ties_sum_prod: int
    z: float
    p_value: float
    alternative: AltHyp
    alpha: float
    test: HypTestResult
    method: str
    data_name: str
