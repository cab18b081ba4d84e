"""
Deaths ~ cases regression

Ordinary least squares of cumulative deaths on cumulative cases for a single
country, via scipy.stats.linregress.

Degenerate input (too few observations, or every case count identical) is
rejected with DegenerateRegressionError rather than fitted.
"""
from dataclasses import asdict, dataclass
from typing import Dict

import numpy as np
import pandas as pd
from scipy import stats


class DegenerateRegressionError(ValueError):
    """Raised when a country's series cannot support a linear fit."""


@dataclass
class RegressionResult:
    """Coefficient summary of one deaths ~ cases fit."""
    country: str
    n_obs: int
    slope: float
    intercept: float
    slope_stderr: float
    intercept_stderr: float
    r_squared: float
    p_value: float

    def to_dict(self) -> Dict:
        return asdict(self)


def fit_deaths_on_cases(
    df: pd.DataFrame,
    country: str,
    min_points: int = 3
) -> RegressionResult:
    """
    Fit deaths = intercept + slope * cases.
    
    Args:
        df: Country-day table for one country (cases, deaths columns)
        country: Label stored on the result
        min_points: Minimum number of observations required
        
    Returns:
        RegressionResult
    """
    data = df[['cases', 'deaths']].dropna()
    x = data['cases'].astype(float).values
    y = data['deaths'].astype(float).values

    if len(x) < min_points:
        raise DegenerateRegressionError(
            f"{country}: {len(x)} observations, need at least {min_points}"
        )
    if np.ptp(x) == 0:
        raise DegenerateRegressionError(f"{country}: cases have zero variance")

    fit = stats.linregress(x, y)

    return RegressionResult(
        country=country,
        n_obs=int(len(x)),
        slope=float(fit.slope),
        intercept=float(fit.intercept),
        slope_stderr=float(fit.stderr),
        intercept_stderr=float(fit.intercept_stderr),
        r_squared=float(fit.rvalue ** 2),
        p_value=float(fit.pvalue),
    )


def predict_deaths(result: RegressionResult, cases) -> np.ndarray:
    """Predicted cumulative deaths for the given case counts."""
    return result.intercept + result.slope * np.asarray(cases, dtype=float)


def add_predictions(df: pd.DataFrame, result: RegressionResult) -> pd.DataFrame:
    """Attach predicted_deaths and residual (actual - predicted) columns.

    Days with missing deaths get a NaN residual.
    """
    df = df.copy()
    df['predicted_deaths'] = predict_deaths(result, df['cases'])
    df['residual'] = df['deaths'].astype(float) - df['predicted_deaths']
    return df


def format_regression(result: RegressionResult) -> str:
    """Coefficient table in the spirit of an OLS summary."""
    title = f"OLS: deaths ~ cases ({result.country})"
    lines = [
        title,
        "-" * len(title),
        f"Observations: {result.n_obs}",
        f"R-squared:    {result.r_squared:.4f}",
        "",
        f"{'':<12}{'coef':>14}{'std err':>14}",
        f"{'intercept':<12}{result.intercept:>14.4f}{result.intercept_stderr:>14.4f}",
        f"{'cases':<12}{result.slope:>14.6f}{result.slope_stderr:>14.6f}",
        "",
        f"p-value (slope): {result.p_value:.3g}",
    ]
    return "\n".join(lines)
