"""
Coerce-or-fallback adapter.

Statistics in this library raise RankStatsError subclasses when they
cannot be computed (empty sample, too many ties, bad alpha). Tabulating
code often prefers a NaN in the cell over aborting the whole analysis;
aok() runs a computation and substitutes a NaN-valued fallback of the
expected return type when it fails with a library error.

Only RankStatsError is absorbed. Anything else, including
RankSumInvariantError (an internal defect), propagates.

Usage:
    p = aok(rank_sum.p, AltHyp.NE)                        # float or nan
    res = aok(rank_sum.test, AltHyp.NE, 0.05, returns=HypTestResult)
"""

from __future__ import annotations

import math
from typing import Any, Callable, TypeVar

from rankstats.core.exceptions import RankStatsError, ValidationError
from rankstats.core.hypothesis import AltHyp, Ci, HypTestResult

T = TypeVar('T')


_FALLBACKS: dict[type, Callable[[], Any]] = {
    float: lambda: math.nan,
    HypTestResult: lambda: HypTestResult(math.nan, math.nan, AltHyp.NE),
    Ci: lambda: Ci(math.nan, math.nan),
}


def register_fallback(kind: type[T], factory: Callable[[], T]) -> None:
    """Register the fallback factory used by aok() for return type `kind`."""
    _FALLBACKS[kind] = factory


def fallback_for(kind: type[T]) -> T:
    """
    NaN-valued fallback instance for return type `kind`.

    Raises:
        ValidationError: If no fallback is registered for `kind`
    """
    try:
        factory = _FALLBACKS[kind]
    except KeyError:
        raise ValidationError(
            f"no fallback registered for {kind.__name__}; "
            f"use register_fallback()"
        ) from None
    return factory()


def aok(
    func: Callable[..., T],
    *args: Any,
    returns: type = float,
    **kwargs: Any,
) -> T:
    """
    Call func(*args, **kwargs), returning a fallback on library errors.

    Parameters
    ----------
    func : callable
        Computation that may raise RankStatsError.
    *args, **kwargs
        Forwarded to func.
    returns : type
        Declared return type of func; selects the fallback. Default float
        (fallback NaN). Checked before func is called so a missing
        fallback is reported even when func succeeds.

    Returns
    -------
    The value returned by func, or fallback_for(returns).
    """
    fallback = fallback_for(returns)
    try:
        return func(*args, **kwargs)
    except RankStatsError:
        return fallback
