"""
A Python package of descriptive statistics for one-dimensional samples.

Computes central tendency and dispersion, reporting undefined results as
``None`` instead of raising or returning a placeholder number.

Modules:
    - stats: Mean, median family, mode, variance and standard deviation.
    - summary: Bundles all statistics for a sample or a pandas column.
    - reporting: Renders summaries as text.
    - schema: Standard column labels for summary tables.
"""

__version__ = "1.0.0"

from .reporting import format_summary, print_summary_table
from .stats import (
    mean,
    median,
    median_high,
    median_low,
    mode,
    population_standard_deviation,
    population_variance,
    ranked_frequencies,
    standard_deviation,
    variance,
)
from .summary import SampleSummary, describe, summarize_frame

__all__ = [
    # Central tendency
    "mean",
    "median",
    "median_low",
    "median_high",
    "mode",
    "ranked_frequencies",
    # Dispersion
    "variance",
    "population_variance",
    "standard_deviation",
    "population_standard_deviation",
    # Summaries
    "SampleSummary",
    "describe",
    "summarize_frame",
    "format_summary",
    "print_summary_table",
]
