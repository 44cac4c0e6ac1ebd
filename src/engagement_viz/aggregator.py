"""
Aggregation of engagement records.

Goals of this module:
- Five-number summaries (with IQR whiskers) of likes per age group.
- Mean likes per (platform, post type) pair actually present in the data.
- Mean likes per date, ordered chronologically.

Every function takes the full record table returned by ``loader`` and
returns a new object; inputs are never modified. Rows whose likes failed to
parse (NaN) are excluded before any statistic is computed.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, Union

import pandas as pd

from .errors import ConfigError

# Module constants
Q1_PROBABILITY = 0.25
MEDIAN_PROBABILITY = 0.5
Q3_PROBABILITY = 0.75
WHISKER_IQR_FACTOR = 1.5
MEAN_QUANTUM = Decimal("0.01")

DATE_BUCKETS = ("day", "timestamp")
DEFAULT_DATE_BUCKET = "day"

GROUPED_MEAN_COLUMNS = ["platform", "post_type", "avg_likes"]
DAILY_MEAN_COLUMNS = ["date", "avg_likes"]


def _numeric_likes(records: pd.DataFrame) -> pd.DataFrame:
    """Drop rows whose likes value is not a number."""
    return records[records["likes"].notna()]


def quantile(values: Union[pd.Series, Iterable[float]], p: float) -> float:
    """Quantile by linear interpolation between order statistics.

    Uses index ``p * (n - 1)`` into the sorted values and interpolates
    between the floor and ceiling elements.
    """
    series = pd.Series(values, dtype=float).dropna()
    if series.empty:
        raise ValueError("quantile of an empty sequence is undefined")
    return float(series.quantile(p, interpolation="linear"))


def round_half_up(value: float) -> float:
    """Round to two decimals with exact ties going up (1.125 -> 1.13)."""
    if math.isnan(value):
        return value
    return float(Decimal(repr(float(value))).quantize(MEAN_QUANTUM, ROUND_HALF_UP))


def round_mean(values: Union[pd.Series, Iterable[float]]) -> float:
    """Arithmetic mean rounded to two decimals, ignoring NaN."""
    return round_half_up(float(pd.Series(values, dtype=float).mean()))


def five_number_summary(values: Union[pd.Series, Iterable[float]]) -> Dict[str, float]:
    """
    Compute the box-plot statistics of a non-empty numeric sequence.

    Args:
        values: Like counts; NaN entries are ignored.

    Returns:
        Dict with min, q1, median, q3, max, iqr, lower_whisker,
        upper_whisker and count. Whiskers extend 1.5 IQR past the box but
        never beyond the observed minimum/maximum.
    """
    ordered = pd.Series(values, dtype=float).dropna().sort_values(ignore_index=True)
    if ordered.empty:
        raise ValueError("five-number summary of an empty sequence is undefined")

    low = float(ordered.iloc[0])
    high = float(ordered.iloc[-1])
    q1 = quantile(ordered, Q1_PROBABILITY)
    median = quantile(ordered, MEDIAN_PROBABILITY)
    q3 = quantile(ordered, Q3_PROBABILITY)
    iqr = q3 - q1

    return {
        "min": low,
        "q1": q1,
        "median": median,
        "q3": q3,
        "max": high,
        "iqr": iqr,
        "lower_whisker": max(low, q1 - WHISKER_IQR_FACTOR * iqr),
        "upper_whisker": min(high, q3 + WHISKER_IQR_FACTOR * iqr),
        "count": int(len(ordered)),
    }


def summarize_by_age_group(records: pd.DataFrame) -> Dict[str, Dict[str, float]]:
    """Five-number summary of likes per age group, in first-seen group order."""
    valid = _numeric_likes(records)
    return {
        age_group: five_number_summary(likes)
        for age_group, likes in valid.groupby("age_group", sort=False)["likes"]
    }


def average_by_platform_and_post_type(records: pd.DataFrame) -> pd.DataFrame:
    """Mean likes per (platform, post_type) pair present in the data.

    Rows are ordered by platform (first-seen), then by post type (first-seen
    within that platform). Pairs with no observations are not synthesized.
    """
    valid = _numeric_likes(records)
    if valid.empty:
        return pd.DataFrame(columns=GROUPED_MEAN_COLUMNS)

    grouped = (
        valid.groupby(["platform", "post_type"], sort=False)["likes"]
        .mean()
        .map(round_half_up)
        .rename("avg_likes")
        .reset_index()
    )

    platform_rank = {name: rank for rank, name in enumerate(pd.unique(valid["platform"]))}
    grouped = grouped.sort_values(
        "platform", key=lambda col: col.map(platform_rank), kind="stable"
    )
    return grouped[GROUPED_MEAN_COLUMNS].reset_index(drop=True)


def average_by_date(
    records: pd.DataFrame, bucket: str = DEFAULT_DATE_BUCKET
) -> pd.DataFrame:
    """
    Mean likes per date, sorted ascending by calendar date.

    Args:
        records: Record table from the loader.
        bucket: "day" groups by calendar day (time of day stripped) and
            labels rows with ISO dates. "timestamp" groups by the original
            date text and only uses the calendar day for ordering.

    Returns:
        DataFrame with columns date and avg_likes. Rows whose date could not
        be parsed are left out.
    """
    if bucket not in DATE_BUCKETS:
        raise ConfigError(f"bucket must be one of {DATE_BUCKETS}, got {bucket!r}")

    valid = _numeric_likes(records)
    valid = valid[valid["day"].notna()]
    if valid.empty:
        return pd.DataFrame(columns=DAILY_MEAN_COLUMNS)

    if bucket == "day":
        daily = valid.groupby("day", sort=True)["likes"].mean().reset_index()
        daily["date"] = daily["day"].dt.strftime("%Y-%m-%d")
    else:
        daily = (
            valid.groupby("date", sort=False)
            .agg(day=("day", "first"), likes=("likes", "mean"))
            .reset_index()
            .sort_values("day", kind="stable")
        )

    daily["avg_likes"] = daily["likes"].map(round_half_up)
    return daily[DAILY_MEAN_COLUMNS].reset_index(drop=True)
