"""Fetching, reshaping and aggregation of JHU CSSE time series."""

from .fetcher import SchemaError, fetch_csv, fetch_sources, validate_wide_schema
from .reshape import date_columns, wide_to_long
from .aggregate import (
    aggregate_by_country,
    build_country_day_table,
    compute_daily_deltas,
    filter_positive_cases,
    join_metrics,
    parse_dates,
)

__all__ = [
    'SchemaError',
    'fetch_csv',
    'fetch_sources',
    'validate_wide_schema',
    'date_columns',
    'wide_to_long',
    'aggregate_by_country',
    'build_country_day_table',
    'compute_daily_deltas',
    'filter_positive_cases',
    'join_metrics',
    'parse_dates',
]
