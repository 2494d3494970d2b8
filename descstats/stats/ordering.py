"""Ordering and counting helpers shared by the central-tendency routines.

This module supports:
- stable ascending sorting of numeric samples for the median family, and
- frequency tables with a reproducible ranking for mode selection.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Hashable, List, Sequence, Tuple, TypeVar

import numpy as np

T = TypeVar("T", bound=Hashable)


def as_sample_array(sample: Sequence[float]) -> np.ndarray:
    """Coerce a numeric sample to a one-dimensional float array.

    Args:
        sample (Sequence[float]): List, tuple, ``numpy.ndarray`` or
            ``pandas.Series`` of real numbers. May be empty.

    Returns:
        numpy.ndarray: A float array view or copy of ``sample``. The caller's
        object is never modified through it.

    Raises:
        ValueError: If ``sample`` is not one-dimensional.
    """
    arr = np.asarray(sample, dtype=float)
    if arr.ndim != 1:
        raise ValueError(
            f"Sample must be one-dimensional, got array with shape {arr.shape}."
        )
    return arr


def sorted_sample(sample: Sequence[float]) -> Tuple[np.ndarray, np.ndarray]:
    """Return a stable ascending ordering of a numeric sample.

    Args:
        sample (Sequence[float]): Real-valued sample.

    Returns:
        tuple[numpy.ndarray, numpy.ndarray]: ``(values, order)`` where
        ``values`` is a sorted float copy and ``order`` holds the positions
        of those values in the original sample, so callers can recover the
        original elements.

    Note:
        Sorting uses ``kind="stable"`` so equal values keep input order.
        Behavior for NaN entries is unspecified.
    """
    arr = as_sample_array(sample)
    order = np.argsort(arr, kind="stable")
    return arr[order], order


def exact_order(sample: Sequence[Any]) -> List[int]:
    """Positions of the sample's elements in stable ascending order.

    Args:
        sample (Sequence): Values compared as given (``int``, ``Decimal``,
            ``Fraction``, ``float``, ...), never rounded to float first.

    Returns:
        list[int]: Indices into ``list(sample)``; equal values keep input
        order.

    Note:
        Use this when an original element must be returned. Distinct
        values such as ``2**53`` and ``2**53 + 1`` compare equal once
        coerced to float, which would let input order override true order.
    """
    values = list(sample)
    return sorted(range(len(values)), key=values.__getitem__)


def frequency_table(sample: Sequence[T]) -> Counter:
    """Count occurrences of each distinct value in a single pass."""
    counts: Counter = Counter()
    for value in sample:
        counts[value] += 1
    return counts


def ranked_frequencies(sample: Sequence[T]) -> List[Tuple[T, int]]:
    """Rank distinct values by frequency.

    Args:
        sample (Sequence[T]): Values that are hashable and totally ordered
            (numbers, strings, ...).

    Returns:
        list[tuple[T, int]]: ``(value, count)`` pairs, most frequent first.
        Values with equal counts appear in ascending natural order.

    Note:
        The pairs are first sorted by value, then stably re-sorted by count
        descending. The result does not depend on the iteration order of the
        underlying mapping.
    """
    by_value = sorted(frequency_table(sample).items(), key=lambda item: item[0])
    return sorted(by_value, key=lambda item: item[1], reverse=True)
