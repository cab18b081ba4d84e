"""
Aggregator - STAGE 3

Joins the long cases/deaths tables, collapses sub-national rows to
national totals and derives day-over-day deltas for a target country.

Steps (order matters):
1. Full outer join on (province, country, date)
2. Parse M/D/YY date labels
3. Keep rows with cases > 0
4. Sum cases and deaths per (country, date)
5. First difference per country

Deltas can be negative when the source revises a cumulative count
downward. They are passed through as-is.
"""
import warnings

import pandas as pd

from .reshape import wide_to_long
from .schema import COUNTRY_DAY_KEYS, JOIN_KEYS


def join_metrics(cases_long: pd.DataFrame, deaths_long: pd.DataFrame) -> pd.DataFrame:
    """
    Full outer join of the long cases and deaths tables.
    
    Rows present in only one table get NaN for the missing metric.
    """
    return cases_long.merge(deaths_long, on=JOIN_KEYS, how='outer')


def parse_dates(df: pd.DataFrame, date_format: str = "%m/%d/%y") -> pd.DataFrame:
    """Convert the date label column to datetimes."""
    df = df.copy()
    df['date'] = pd.to_datetime(df['date'], format=date_format)
    return df


def filter_positive_cases(df: pd.DataFrame) -> pd.DataFrame:
    """Drop pre-outbreak and cleanup rows (cases <= 0 or missing)."""
    return df[df['cases'] > 0].reset_index(drop=True)


def aggregate_by_country(df: pd.DataFrame) -> pd.DataFrame:
    """
    Sum cases and deaths across provinces for each (country, date).
    
    A (country, date) with no deaths reported by any province keeps a
    missing deaths value rather than zero.
    
    Returns:
        DataFrame with columns: country, date, cases, deaths
    """
    country_day = (
        df.groupby(COUNTRY_DAY_KEYS, as_index=False)[['cases', 'deaths']]
        .sum(min_count=1)
        .sort_values(COUNTRY_DAY_KEYS)
        .reset_index(drop=True)
    )
    country_day['cases'] = country_day['cases'].astype('int64')
    country_day['deaths'] = country_day['deaths'].astype('Int64')
    return country_day


def compute_daily_deltas(country_day: pd.DataFrame, country: str) -> pd.DataFrame:
    """
    Add new_cases / new_deaths for one country.
    
    The series is ordered by date and first-differenced; the first day has no
    predecessor and is dropped. A missing deaths value leaves new_deaths
    missing on both sides of it.
    
    Args:
        country_day: Output of aggregate_by_country()
        country: Country name as it appears in the source
        
    Returns:
        DataFrame with columns: country, date, cases, deaths, new_cases, new_deaths
    """
    sub = country_day[country_day['country'] == country].sort_values('date').copy()
    if sub.empty:
        warnings.warn(f"No rows for country {country!r} after filtering")

    sub['new_cases'] = sub['cases'].diff()
    sub['new_deaths'] = sub['deaths'].diff()

    sub = sub.iloc[1:].copy()
    sub['new_cases'] = sub['new_cases'].astype('int64')
    sub['new_deaths'] = sub['new_deaths'].astype('Int64')
    return sub.reset_index(drop=True)


def build_country_day_table(
    cases_wide: pd.DataFrame,
    deaths_wide: pd.DataFrame,
    date_format: str = "%m/%d/%y"
) -> pd.DataFrame:
    """
    Build the joined country-day table from the raw wide tables.
    
    Returns:
        DataFrame with columns: country, date, cases, deaths (cases > 0)
    """
    cases_long = wide_to_long(cases_wide, 'cases')
    deaths_long = wide_to_long(deaths_wide, 'deaths')
    print(f"  → {len(cases_long)} case rows, {len(deaths_long)} death rows (long)")

    joined = join_metrics(cases_long, deaths_long)
    joined = parse_dates(joined, date_format)
    joined = filter_positive_cases(joined)
    print(f"  → {len(joined)} rows with cases > 0")

    country_day = aggregate_by_country(joined)
    print(f"  → {len(country_day)} country-day rows, "
          f"{country_day['country'].nunique()} countries")
    return country_day
