"""
Descriptive statistics over one-dimensional samples.

This subpackage provides the core numerical routines. All functions are
pure: they never modify the sample they are given and keep no state between
calls.

Modules:
    ordering:
        Stable sorting of numeric samples and frequency tables with a
        deterministic ranking (count descending, value ascending).

    central:
        Mean, median, low/high median and mode. Undefined for an empty
        sample.

    dispersion:
        Sample and population variance and standard deviation. The sample
        estimators need at least two points, the population estimators one.

Design Principle:
    An undefined result is always returned as ``None``. No function raises
    for an empty or too-short sample.
"""

from .central import mean, median, median_high, median_low, mode
from .dispersion import (
    population_standard_deviation,
    population_variance,
    standard_deviation,
    variance,
)
from .ordering import exact_order, frequency_table, ranked_frequencies, sorted_sample

__all__ = [
    "mean",
    "median",
    "median_low",
    "median_high",
    "mode",
    "variance",
    "population_variance",
    "standard_deviation",
    "population_standard_deviation",
    "exact_order",
    "frequency_table",
    "ranked_frequencies",
    "sorted_sample",
]
