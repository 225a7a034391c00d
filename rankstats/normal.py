"""
Normal and Student-t tail lookups.

Turns test statistics into p-values and significance levels into critical
values. The rank-sum test uses z_to_p() for its large-sample normal
approximation; the others serve callers building their own z/t tests.
"""

from __future__ import annotations

from scipy import stats as sp_stats

from rankstats.core.exceptions import ValidationError
from rankstats.core.hypothesis import AltHyp
from rankstats.core.validation import check_alpha


def z_to_p(z: float, alt_hyp: AltHyp | str) -> float:
    """
    Tail probability of the standard normal beyond z.

    Parameters
    ----------
    z : float
        Standard normal statistic.
    alt_hyp : AltHyp or str
        LT: left tail P(Z <= z). GT: right tail P(Z >= z).
        NE: two tails 2 P(Z >= |z|).

    Returns
    -------
    float
    """
    alt_hyp = AltHyp.from_alternative(alt_hyp)
    if alt_hyp is AltHyp.LT:
        return float(sp_stats.norm.cdf(z))
    if alt_hyp is AltHyp.GT:
        return float(sp_stats.norm.cdf(-z))
    return float(2.0 * sp_stats.norm.cdf(-abs(z)))


def t_to_p(t: float, df: float, alt_hyp: AltHyp | str) -> float:
    """
    Tail probability of Student's t with `df` degrees of freedom beyond t.

    Same tail conventions as z_to_p().

    Raises:
        ValidationError: If df is not > 0
    """
    _check_df(df)
    alt_hyp = AltHyp.from_alternative(alt_hyp)
    if alt_hyp is AltHyp.LT:
        return float(sp_stats.t.cdf(t, df))
    if alt_hyp is AltHyp.GT:
        return float(sp_stats.t.cdf(-t, df))
    return float(2.0 * sp_stats.t.cdf(-abs(t), df))


def z_alpha(alpha: float) -> float:
    """
    Critical value v with P(Z > v) = alpha for the standard normal.

    Raises:
        InvalidAlphaError: If alpha not in (0, 1)
    """
    alpha = check_alpha(alpha)
    return float(sp_stats.norm.ppf(1.0 - alpha))


def t_alpha(df: float, alpha: float) -> float:
    """
    Critical value v with P(T > v) = alpha for Student's t with `df`
    degrees of freedom.

    Raises:
        InvalidAlphaError: If alpha not in (0, 1)
        ValidationError: If df is not > 0
    """
    alpha = check_alpha(alpha)
    _check_df(df)
    return float(sp_stats.t.ppf(1.0 - alpha, df))


def _check_df(df: float) -> None:
    if not (df > 0):
        raise ValidationError(f"df must be > 0, got {df}")
