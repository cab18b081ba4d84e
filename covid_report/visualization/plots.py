"""
Plotting for the COVID country report.

Every function writes a single PNG and closes its figure.
"""
from pathlib import Path
from typing import Dict

import pandas as pd
import matplotlib.pyplot as plt
import matplotlib.dates as mdates

from ..analysis.regression import RegressionResult, add_predictions


FIGSIZE = (12, 6)
DPI = 150

COLORS = {
    'cases': '#1f77b4',
    'deaths': '#C0392B',
    'predicted': '#F39C12',
}

# Line styles for the comparison chart: first country solid, second dashed
COUNTRY_STYLES = ['-', '--']


def _format_date_axis(ax) -> None:
    ax.xaxis.set_major_formatter(mdates.DateFormatter('%Y-%m'))
    ax.xaxis.set_major_locator(mdates.AutoDateLocator())
    plt.setp(ax.get_xticklabels(), rotation=45, ha='right')


def _save(fig, out_path: Path, dpi: int) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, dpi=dpi, bbox_inches='tight', facecolor='white')
    plt.close(fig)
    return out_path


def plot_country_trends(
    df: pd.DataFrame,
    country: str,
    out_path: Path,
    log_scale: bool = True,
    dpi: int = DPI
) -> Path:
    """
    Cumulative cases and deaths over time for one country.
    
    Title: "<country> COVID Cases and Deaths"
    """
    df = df.sort_values('date')
    fig, ax = plt.subplots(figsize=FIGSIZE)

    ax.plot(df['date'], df['cases'], '-', color=COLORS['cases'], linewidth=2, label='Cases')
    ax.plot(df['date'], df['deaths'].astype(float), '-', color=COLORS['deaths'], linewidth=2, label='Deaths')

    if log_scale:
        ax.set_yscale('log')

    ax.set_xlabel('Date', fontsize=12, fontweight='bold')
    ax.set_ylabel('Cumulative count', fontsize=12, fontweight='bold')
    ax.set_title(f'{country} COVID Cases and Deaths', fontsize=14, fontweight='bold', pad=15)
    _format_date_axis(ax)
    ax.grid(True, alpha=0.3, linestyle='--')
    ax.legend(loc='upper left', framealpha=0.95)

    return _save(fig, out_path, dpi)


def plot_comparison(
    tables: Dict[str, pd.DataFrame],
    out_path: Path,
    log_scale: bool = True,
    dpi: int = DPI
) -> Path:
    """
    Cases and deaths for both countries on one chart (four series).
    
    Title: "<A> and <B> Cases and Deaths"
    """
    countries = list(tables)
    fig, ax = plt.subplots(figsize=FIGSIZE)

    for style, country in zip(COUNTRY_STYLES, countries):
        df = tables[country].sort_values('date')
        ax.plot(df['date'], df['cases'], style, color=COLORS['cases'],
                linewidth=2, label=f'{country} cases')
        ax.plot(df['date'], df['deaths'].astype(float), style, color=COLORS['deaths'],
                linewidth=2, label=f'{country} deaths')

    if log_scale:
        ax.set_yscale('log')

    ax.set_xlabel('Date', fontsize=12, fontweight='bold')
    ax.set_ylabel('Cumulative count', fontsize=12, fontweight='bold')
    ax.set_title(f"{' and '.join(countries)} Cases and Deaths",
                 fontsize=14, fontweight='bold', pad=15)
    _format_date_axis(ax)
    ax.grid(True, alpha=0.3, linestyle='--')
    ax.legend(loc='upper left', framealpha=0.95)

    return _save(fig, out_path, dpi)


def plot_daily_deltas(
    deltas: pd.DataFrame,
    country: str,
    out_path: Path,
    dpi: int = DPI
) -> Path:
    """Daily new cases and new deaths as bars, one panel each."""
    fig, (ax_cases, ax_deaths) = plt.subplots(2, 1, figsize=FIGSIZE, sharex=True)

    ax_cases.bar(deltas['date'], deltas['new_cases'], color=COLORS['cases'], width=1.0)
    ax_cases.set_ylabel('New cases', fontsize=12, fontweight='bold')
    ax_cases.set_title(f'{country} Daily New Cases and Deaths',
                       fontsize=14, fontweight='bold', pad=15)

    ax_deaths.bar(deltas['date'], deltas['new_deaths'].astype(float), color=COLORS['deaths'], width=1.0)
    ax_deaths.set_ylabel('New deaths', fontsize=12, fontweight='bold')
    ax_deaths.set_xlabel('Date', fontsize=12, fontweight='bold')
    _format_date_axis(ax_deaths)

    for ax in (ax_cases, ax_deaths):
        ax.axhline(0, color='black', linewidth=0.8)
        ax.grid(True, alpha=0.3, linestyle='--')

    return _save(fig, out_path, dpi)


def plot_regression_fit(
    df: pd.DataFrame,
    result: RegressionResult,
    out_path: Path,
    dpi: int = DPI
) -> Path:
    """
    Actual vs predicted deaths keyed by cases, with a residual panel.
    
    The x-axis is cumulative cases, not time.
    """
    fitted = add_predictions(df, result).sort_values('cases')

    fig, (ax_fit, ax_resid) = plt.subplots(
        2, 1, figsize=(10, 8), sharex=True, gridspec_kw={'height_ratios': [3, 1]}
    )

    ax_fit.scatter(fitted['cases'], fitted['deaths'].astype(float), s=12, color=COLORS['deaths'],
                   alpha=0.7, label='Actual deaths')
    ax_fit.plot(fitted['cases'], fitted['predicted_deaths'], '-', color=COLORS['predicted'],
                linewidth=2, label=f'Predicted (R² = {result.r_squared:.3f})')
    ax_fit.set_ylabel('Cumulative deaths', fontsize=12, fontweight='bold')
    ax_fit.set_title(f'{result.country}: Deaths vs Cases (OLS)',
                     fontsize=14, fontweight='bold', pad=15)
    ax_fit.grid(True, alpha=0.3, linestyle='--')
    ax_fit.legend(loc='upper left', framealpha=0.95)

    ax_resid.scatter(fitted['cases'], fitted['residual'], s=10, color='#34495E', alpha=0.7)
    ax_resid.axhline(0, color='black', linestyle='--', linewidth=1)
    ax_resid.set_xlabel('Cumulative cases', fontsize=12, fontweight='bold')
    ax_resid.set_ylabel('Residual', fontsize=12, fontweight='bold')
    ax_resid.grid(True, alpha=0.3, linestyle='--')

    return _save(fig, out_path, dpi)
