"""Measures of dispersion built on the arithmetic mean.

This module supports:
- the Bessel-corrected sample variance and standard deviation, and
- the population variance and standard deviation.

Undefined results (too few data points) are returned as ``None``.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

import numpy as np

from .central import mean
from .ordering import as_sample_array

logger = logging.getLogger(__name__)

# Minimum sizes for which each estimator is defined.
MIN_SAMPLE_POINTS = 2
MIN_POPULATION_POINTS = 1


def _sum_of_squares(arr: np.ndarray) -> Optional[float]:
    """Sum of squared deviations from the mean, or ``None`` when empty."""
    center = mean(arr)
    if center is None:
        return None
    return float(np.sum((arr - center) ** 2))


def variance(sample: Sequence[float]) -> Optional[float]:
    """Unbiased sample variance with an ``n - 1`` denominator.

    Args:
        sample (Sequence[float]): Real-valued sample.

    Returns:
        float | None: ``Σ(x - mean)^2 / (n - 1)``, or ``None`` when the sample
        has fewer than two points.

    Note:
        Use this estimator when the sample stands in for a larger population.

    References:
        Bessel's correction for sample variance.
    """
    arr = as_sample_array(sample)
    n = int(arr.size)
    if n < MIN_SAMPLE_POINTS:
        logger.debug("variance undefined for a sample of %d point(s)", n)
        return None
    return _sum_of_squares(arr) / (n - 1)


def population_variance(sample: Sequence[float]) -> Optional[float]:
    """Population variance with an ``n`` denominator.

    Args:
        sample (Sequence[float]): Real-valued sample treated as the entire
            population.

    Returns:
        float | None: ``Σ(x - mean)^2 / n``; ``0.0`` for a single point and
        ``None`` for an empty sample.
    """
    arr = as_sample_array(sample)
    n = int(arr.size)
    if n < MIN_POPULATION_POINTS:
        logger.debug("population_variance undefined for an empty sample")
        return None
    return _sum_of_squares(arr) / n


def _sqrt_or_none(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    return math.sqrt(value)


def standard_deviation(sample: Sequence[float]) -> Optional[float]:
    """Square root of :func:`variance`; ``None`` for fewer than two points."""
    return _sqrt_or_none(variance(sample))


def population_standard_deviation(sample: Sequence[float]) -> Optional[float]:
    """Square root of :func:`population_variance`; ``None`` when empty."""
    return _sqrt_or_none(population_variance(sample))
