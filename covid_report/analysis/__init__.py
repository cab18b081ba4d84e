"""Descriptive statistics and regressions for the country-day tables."""

from .summary import describe_country, format_summary, join_deltas
from .regression import (
    DegenerateRegressionError,
    RegressionResult,
    add_predictions,
    fit_deaths_on_cases,
    format_regression,
    predict_deaths,
)

__all__ = [
    'describe_country',
    'format_summary',
    'join_deltas',
    'DegenerateRegressionError',
    'RegressionResult',
    'add_predictions',
    'fit_deaths_on_cases',
    'format_regression',
    'predict_deaths',
]
