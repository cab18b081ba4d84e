"""Summary statistics for country-day tables."""

from typing import Sequence

import pandas as pd


SUMMARY_COLUMNS: Sequence[str] = (
    "cases",
    "deaths",
    "new_cases",
    "new_deaths",
)


def describe_country(df: pd.DataFrame) -> pd.DataFrame:
    """
    Count / mean / min / quartiles / max for the count columns present.
    
    Returns:
        DataFrame indexed by statistic, one column per metric
    """
    cols = [c for c in SUMMARY_COLUMNS if c in df.columns]
    if not cols:
        raise ValueError(f"No count columns to describe in {list(df.columns)}")
    return df[cols].describe()


def format_summary(stats: pd.DataFrame, title: str) -> str:
    lines = [title, "-" * len(title), stats.round(2).to_string()]
    return "\n".join(lines)


def join_deltas(series: pd.DataFrame, deltas: pd.DataFrame) -> pd.DataFrame:
    """
    Country-day series with the delta columns attached by date.
    
    Every day of the series is kept; the first day has missing deltas.
    """
    return series.merge(deltas[['date', 'new_cases', 'new_deaths']], on='date', how='left')
