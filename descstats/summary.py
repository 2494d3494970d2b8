"""Collect every descriptive statistic for a sample or a table column.

``describe`` bundles the individual routines of :mod:`descstats.stats` into
one immutable record. ``summarize_frame`` applies it to a pandas column,
optionally per group, and is the tabular boundary of the package.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from .schema import COLUMNS
from .stats import (
    mean,
    median,
    median_high,
    median_low,
    mode,
    population_standard_deviation,
    population_variance,
    standard_deviation,
    variance,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SampleSummary:
    """Descriptive statistics for one sample.

    Every statistic is ``None`` when it is undefined for the sample size.
    """

    count: int
    mean: Optional[float] = None
    median: Optional[float] = None
    median_low: Optional[float] = None
    median_high: Optional[float] = None
    mode: Optional[Any] = None
    variance: Optional[float] = None
    population_variance: Optional[float] = None
    standard_deviation: Optional[float] = None
    population_standard_deviation: Optional[float] = None

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def describe(sample: Sequence[float]) -> SampleSummary:
    """Compute all descriptive statistics for ``sample``.

    Args:
        sample (Sequence[float]): Real-valued, one-dimensional sample.

    Returns:
        SampleSummary: Count plus each statistic, ``None`` where undefined.
    """
    return SampleSummary(
        count=len(sample),
        mean=mean(sample),
        median=median(sample),
        median_low=median_low(sample),
        median_high=median_high(sample),
        mode=mode(sample),
        variance=variance(sample),
        population_variance=population_variance(sample),
        standard_deviation=standard_deviation(sample),
        population_standard_deviation=population_standard_deviation(sample),
    )


def _summary_columns(grouped: bool) -> List[str]:
    head = [COLUMNS.group, COLUMNS.n] if grouped else [COLUMNS.n]
    return head + COLUMNS.statistic_columns()


def _record(summary: SampleSummary) -> Dict[str, Any]:
    return {
        COLUMNS.n: summary.count,
        COLUMNS.mean: summary.mean,
        COLUMNS.median: summary.median,
        COLUMNS.median_low: summary.median_low,
        COLUMNS.median_high: summary.median_high,
        COLUMNS.mode: summary.mode,
        COLUMNS.variance: summary.variance,
        COLUMNS.pvariance: summary.population_variance,
        COLUMNS.stdev: summary.standard_deviation,
        COLUMNS.pstdev: summary.population_standard_deviation,
    }


def _numeric_values(df: pd.DataFrame, value_col: str) -> np.ndarray:
    """Coerce ``value_col`` to float, logging how many entries are unusable."""
    values = pd.to_numeric(df[value_col], errors="coerce").to_numpy(dtype=float)
    n_dropped = int(np.sum(~np.isfinite(values)))
    if n_dropped:
        logger.warning(
            "Dropped %d non-numeric or non-finite entries from column '%s'",
            n_dropped,
            value_col,
        )
    return values


def summarize_frame(
    df: pd.DataFrame, value_col: str, group_col: Optional[str] = None
) -> pd.DataFrame:
    """Summarize a numeric column, optionally per group.

    Args:
        df (pandas.DataFrame): Source table.
        value_col (str): Column whose values are summarized. Entries that
            cannot be parsed as finite numbers are dropped.
        group_col (str, optional): Column to group by. When omitted the
            whole column is summarized as a single row.

    Returns:
        pandas.DataFrame: One row per group (sorted by group key) with the
        labels from :class:`descstats.schema.SummaryColumns`. Statistic
        columns use the nullable ``Float64`` dtype so undefined results are
        ``<NA>``, not ``NaN``.

    Raises:
        KeyError: If ``value_col`` or ``group_col`` is not a column of ``df``.

    Note:
        A warning is logged with the number of entries dropped as
        non-numeric or non-finite, and another with the number of rows
        dropped because their group key is missing.
    """
    columns = _summary_columns(group_col is not None)
    for col in (value_col, group_col):
        if col is not None and col not in df.columns:
            raise KeyError(f"Column '{col}' not found in DataFrame.")

    rows = []
    if not df.empty and group_col is None:
        values = _numeric_values(df, value_col)
        rows.append(_record(describe(values[np.isfinite(values)])))
    elif not df.empty:
        values = _numeric_values(df, value_col)
        keys = df[group_col]
        n_unkeyed = int(keys.isna().sum())
        if n_unkeyed:
            logger.warning(
                "Dropped %d rows with a missing key in group column '%s'",
                n_unkeyed,
                group_col,
            )
        working = pd.DataFrame({"key": keys.to_numpy(), "value": values})
        for key, group in working.groupby("key", sort=True):
            vals = group["value"].to_numpy(dtype=float)
            vals = vals[np.isfinite(vals)]
            record = _record(describe(vals))
            record[COLUMNS.group] = key
            rows.append(record)

    data: Dict[str, Any] = {col: [row[col] for row in rows] for col in columns}
    data[COLUMNS.n] = np.asarray(data[COLUMNS.n], dtype=int)
    for col in COLUMNS.statistic_columns():
        data[col] = pd.array(
            [None if v is None else float(v) for v in data[col]], dtype="Float64"
        )
    return pd.DataFrame(data, columns=columns)
