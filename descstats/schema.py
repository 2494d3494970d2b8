"""Define standardized column names for summary DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SummaryColumns:
    """Container for standardized column labels.

    These labels are used by ``summarize_frame`` and the reporting helpers so
    that tables built in different places line up.

    Attributes:
        group: Column holding the group key when a grouping column is given.
        n: Number of finite values that entered the statistics.
        stdev: Bessel-corrected standard deviation. Missing (``<NA>``) for
            groups with fewer than two values.
        pstdev: Population standard deviation. ``0.0`` for a single value.
    """

    group: str = "Group"
    n: str = "n"
    mean: str = "Mean"
    median: str = "Median"
    median_low: str = "Median (low)"
    median_high: str = "Median (high)"
    mode: str = "Mode"
    variance: str = "Variance"
    pvariance: str = "Population Variance"
    stdev: str = "Standard Deviation"
    pstdev: str = "Population Standard Deviation"

    def statistic_columns(self) -> list[str]:
        """Statistic labels in display order, excluding ``group`` and ``n``."""
        return [
            self.mean,
            self.median,
            self.median_low,
            self.median_high,
            self.mode,
            self.variance,
            self.pvariance,
            self.stdev,
            self.pstdev,
        ]


COLUMNS = SummaryColumns()
