"""
Grouping of sorted samples into (value, count) runs.

The rank-sum merge consumes samples as runs of equal values so that tied
observations can be ranked together without materializing the sample.
"""

from __future__ import annotations

from typing import Iterable, Iterator, TypeVar

V = TypeVar('V')

_EMPTY = object()


def iter_with_counts(source: Iterable[V]) -> Iterator[tuple[V, int]]:
    """
    Collapse consecutive equal values into (value, count) pairs.

    Only adjacent duplicates are merged; no ordering is enforced, so an
    unsorted source simply yields a repeated value as separate groups.
    Lazy and single pass: the source is consumed as the result is
    iterated, and the result is restartable only by calling this
    function again on a re-iterable source.

    Parameters
    ----------
    source : iterable
        Values, typically sorted in non-decreasing order.

    Yields
    ------
    tuple
        (value, count) with count >= 1 the run length of value.

    Examples
    --------
    >>> list(iter_with_counts([1., 3., 10., 10., 10., 9., 9., 10., 20.]))
    [(1.0, 1), (3.0, 1), (10.0, 3), (9.0, 2), (10.0, 1), (20.0, 1)]
    """
    it = iter(source)
    prev = next(it, _EMPTY)
    if prev is _EMPTY:
        return

    count = 1
    for value in it:
        if value == prev:
            count += 1
        else:
            yield prev, count
            prev = value
            count = 1
    yield prev, count
