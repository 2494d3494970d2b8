"""Render summaries as human-readable text.

Undefined statistics are shown as ``undefined`` so they are never mistaken
for a computed zero.
"""

from __future__ import annotations

import numbers
from typing import Any

import pandas as pd

from .schema import COLUMNS
from .summary import SampleSummary

DEFAULT_PRECISION = 3

_LABELS = [
    ("mean", COLUMNS.mean),
    ("median", COLUMNS.median),
    ("median_low", COLUMNS.median_low),
    ("median_high", COLUMNS.median_high),
    ("mode", COLUMNS.mode),
    ("variance", COLUMNS.variance),
    ("population_variance", COLUMNS.pvariance),
    ("standard_deviation", COLUMNS.stdev),
    ("population_standard_deviation", COLUMNS.pstdev),
]


def format_value(value: Any, precision: int = DEFAULT_PRECISION) -> str:
    """Format one statistic; ``None`` and ``<NA>`` become ``undefined``."""
    if value is None or value is pd.NA:
        return "undefined"
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return f"{float(value):.{precision}f}"
    return str(value)


def format_summary(summary: SampleSummary, precision: int = DEFAULT_PRECISION) -> str:
    """Render a :class:`SampleSummary` as aligned ``label: value`` lines.

    Args:
        summary (SampleSummary): Output of ``describe``.
        precision (int, optional): Decimal places for numeric values.
            Defaults to ``DEFAULT_PRECISION``.

    Returns:
        str: Multi-line text starting with the sample count.
    """
    if precision < 0:
        raise ValueError("precision must be >= 0")
    width = max(len(label) for _, label in _LABELS)
    lines = [f"{COLUMNS.n:<{width}}: {summary.count}"]
    for field, label in _LABELS:
        value = getattr(summary, field)
        lines.append(f"{label:<{width}}: {format_value(value, precision)}")
    return "\n".join(lines)


def print_summary_table(table: pd.DataFrame, precision: int = DEFAULT_PRECISION):
    """Print a table from ``summarize_frame``, one line per row."""
    print("\nDescriptive statistics:")
    if table.empty:
        print("  (no data)")
        return

    for _, row in table.iterrows():
        name = row[COLUMNS.group] if COLUMNS.group in table.columns else "all"
        mean_text = format_value(row[COLUMNS.mean], precision)
        sd_text = format_value(row[COLUMNS.stdev], precision)
        print(f" - {name}: mean = {mean_text}, sd = {sd_text} (n={int(row[COLUMNS.n])})")
