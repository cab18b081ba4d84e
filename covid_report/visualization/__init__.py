"""Report charts."""

from .plots import (
    plot_comparison,
    plot_country_trends,
    plot_daily_deltas,
    plot_regression_fit,
)

__all__ = [
    'plot_comparison',
    'plot_country_trends',
    'plot_daily_deltas',
    'plot_regression_fit',
]
