"""
Report pipeline: fetch → reshape → aggregate → report.

Stages run strictly in order, once per invocation. Nothing is persisted
except the rendered figures.
"""
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List

import pandas as pd

from .analysis.regression import (
    DegenerateRegressionError,
    RegressionResult,
    fit_deaths_on_cases,
)
from .analysis.summary import describe_country, join_deltas
from .config import get_countries
from .data.aggregate import build_country_day_table, compute_daily_deltas
from .data.fetcher import SchemaError, fetch_sources
from .data.schema import SOURCE_METRICS
from .visualization.plots import (
    plot_comparison,
    plot_country_trends,
    plot_daily_deltas,
    plot_regression_fit,
)


@dataclass
class ReportResult:
    """Everything the report computed in one run."""
    countries: List[str]
    country_day: pd.DataFrame
    deltas: Dict[str, pd.DataFrame]
    summaries: Dict[str, pd.DataFrame]
    regressions: Dict[str, RegressionResult]
    figures: List[Path] = field(default_factory=list)


def _slug(name: str) -> str:
    return name.lower().replace(' ', '_')


def run_report(
    cfg: Dict[str, Any],
    output_dir: Path,
    fetch: Callable[..., Dict[str, pd.DataFrame]] = fetch_sources
) -> ReportResult:
    """
    Run the full report.
    
    Args:
        cfg: Loaded configuration (see config/config_default.yaml)
        output_dir: Directory for the PNG figures
        fetch: Source fetcher, called as fetch(sources, timeout=..., date_format=...)
        
    Returns:
        ReportResult
    """
    data_cfg = cfg['data']
    countries = get_countries(cfg)
    date_format = cfg.get('processing', {}).get('date_format', '%m/%d/%y')
    report_cfg = cfg.get('reporting', {})
    log_scale = report_cfg.get('log_scale', True)
    dpi = report_cfg.get('dpi', 150)
    min_points = cfg.get('regression', {}).get('min_points', 3)
    output_dir = Path(output_dir)

    # Stage 1: fetch
    tables = fetch(
        data_cfg['sources'],
        timeout=data_cfg.get('fetch', {}).get('timeout', 30),
        date_format=date_format,
    )
    missing = [m for m in SOURCE_METRICS if m not in tables]
    if missing:
        raise SchemaError(f"Missing source tables: {missing}")

    # Stages 2-3: reshape, join, aggregate
    print("\nBuilding country-day table...")
    country_day = build_country_day_table(tables['confirmed'], tables['deaths'], date_format)

    deltas = {}
    per_country = {}
    for country in countries:
        per_country[country] = country_day[country_day['country'] == country]
        deltas[country] = compute_daily_deltas(country_day, country)
        print(f"  → {country}: {len(per_country[country])} days, "
              f"{len(deltas[country])} with deltas")

    # Stage 4: report
    summaries = {c: describe_country(join_deltas(per_country[c], deltas[c])) for c in countries}

    figures = []
    for country in countries:
        figures.append(plot_country_trends(
            per_country[country], country,
            output_dir / f"{_slug(country)}_cases_deaths.png",
            log_scale=log_scale, dpi=dpi,
        ))
    figures.append(plot_comparison(
        per_country,
        output_dir / f"{'_'.join(_slug(c) for c in countries)}_cases_deaths.png",
        log_scale=log_scale, dpi=dpi,
    ))
    for country in countries:
        figures.append(plot_daily_deltas(
            deltas[country], country,
            output_dir / f"{_slug(country)}_daily_deltas.png", dpi=dpi,
        ))

    regressions = {}
    for country in countries:
        try:
            result = fit_deaths_on_cases(per_country[country], country, min_points=min_points)
        except DegenerateRegressionError as e:
            warnings.warn(f"Skipping regression: {e}")
            continue
        regressions[country] = result
        figures.append(plot_regression_fit(
            per_country[country], result,
            output_dir / f"{_slug(country)}_regression.png", dpi=dpi,
        ))

    return ReportResult(
        countries=countries,
        country_day=country_day,
        deltas=deltas,
        summaries=summaries,
        regressions=regressions,
        figures=figures,
    )
