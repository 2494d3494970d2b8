"""Measures of central tendency: mean, the median family, and mode.

Every function returns ``None`` when the sample is empty. ``None`` is the
only way an undefined result is reported; no numeric placeholder such as
``0.0`` or ``nan`` stands in for it.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from .ordering import (
    T,
    as_sample_array,
    exact_order,
    ranked_frequencies,
    sorted_sample,
)

logger = logging.getLogger(__name__)


def mean(sample: Sequence[float]) -> Optional[float]:
    """Arithmetic mean of a numeric sample.

    Args:
        sample (Sequence[float]): Real-valued sample, possibly empty.

    Returns:
        float | None: ``sum(sample) / len(sample)``, or ``None`` for an empty
        sample.
    """
    arr = as_sample_array(sample)
    if arr.size == 0:
        logger.debug("mean undefined for an empty sample")
        return None
    return float(np.mean(arr))


def median(sample: Sequence[float]) -> Optional[float]:
    """Median using the mean-of-middle-two convention for even sizes.

    Args:
        sample (Sequence[float]): Real-valued sample, possibly empty.

    Returns:
        float | None: The middle value of the sorted sample, the mean of the
        two middle values when the size is even, or ``None`` when empty.

    Examples:
        ``median([1, 3, 5]) == 3`` and ``median([1, 3, 5, 7]) == 4``.
    """
    values, _ = sorted_sample(sample)
    n = int(values.size)
    if n == 0:
        logger.debug("median undefined for an empty sample")
        return None
    mid = n // 2
    if n % 2 == 0:
        return float((values[mid - 1] + values[mid]) / 2.0)
    return float(values[mid])


def _member_at(sample: Sequence[T], rank: int) -> T:
    """Return the original element holding ``rank`` in sorted order."""
    as_sample_array(sample)  # shape check only
    order = exact_order(sample)
    return list(sample)[order[rank]]


def median_low(sample: Sequence[T]) -> Optional[T]:
    """Low median: the smaller middle element for even sizes.

    Args:
        sample (Sequence[T]): Real-valued sample, possibly empty. Exact types
            (``int``, ``Decimal``, ``Fraction``) are ranked without rounding.

    Returns:
        T | None: The caller's element at sorted position ``n // 2 - 1`` for
        even ``n`` and ``n // 2`` for odd ``n``, or ``None`` when empty.
    """
    n = len(sample)
    if n == 0:
        logger.debug("median_low undefined for an empty sample")
        return None
    rank = n // 2 - 1 if n % 2 == 0 else n // 2
    return _member_at(sample, rank)


def median_high(sample: Sequence[T]) -> Optional[T]:
    """High median: the element at sorted position ``n // 2``.

    Args:
        sample (Sequence[T]): Real-valued sample, possibly empty.

    Returns:
        T | None: The caller's element at sorted position ``n // 2``, or
        ``None`` when empty.
    """
    n = len(sample)
    if n == 0:
        logger.debug("median_high undefined for an empty sample")
        return None
    return _member_at(sample, n // 2)


def mode(sample: Sequence[T]) -> Optional[T]:
    """Most frequent value, ties resolved toward the smallest value.

    Args:
        sample (Sequence[T]): Hashable, totally ordered values (numbers,
            strings, ...), possibly empty.

    Returns:
        T | None: The value with the highest count. When several values
        share that count the smallest under natural order is returned.
        ``None`` for an empty sample.

    Examples:
        ``mode([1, 1, 2, 3, 3, 3, 3, 4]) == 3`` and
        ``mode(["red", "blue", "green", "red"]) == "red"``.
    """
    ranked = ranked_frequencies(sample)
    if not ranked:
        logger.debug("mode undefined for an empty sample")
        return None
    return ranked[0][0]
