"""
Fetcher for the COVID country report - STAGE 1

Downloads the JHU CSSE global time-series CSVs (confirmed, deaths,
recovered). Each resource is a wide table: identifier columns followed by
one column per date.

There is no retry. A network failure or a missing column aborts the run.

Source: https://github.com/CSSEGISandData/COVID-19
"""
import io
from typing import Dict, List

import pandas as pd
import requests

from .schema import WIDE_ID_COLUMNS


class SchemaError(ValueError):
    """Raised when a fetched table does not have the expected wide layout."""


def fetch_csv(url: str, timeout: float = 30) -> pd.DataFrame:
    """
    Download a CSV resource and parse it into a DataFrame.
    
    Args:
        url: Resource URL
        timeout: Request timeout in seconds
        
    Returns:
        DataFrame matching the CSV header structure
    """
    resp = requests.get(url, timeout=timeout)
    resp.raise_for_status()
    return pd.read_csv(io.StringIO(resp.text))


def validate_wide_schema(
    df: pd.DataFrame,
    name: str = "table",
    date_format: str = "%m/%d/%y"
) -> List[str]:
    """
    Check that a wide table has the identifier columns followed by dates.
    
    Every non-identifier column label must parse with date_format.
    
    Returns:
        List of date column labels
    """
    missing = [c for c in WIDE_ID_COLUMNS if c not in df.columns]
    if missing:
        raise SchemaError(f"{name} missing required columns: {missing}")

    dates = [c for c in df.columns if c not in WIDE_ID_COLUMNS]
    if not dates:
        raise SchemaError(f"{name} has no date columns")

    try:
        pd.to_datetime(pd.Series(dates), format=date_format)
    except (ValueError, TypeError) as e:
        raise SchemaError(f"{name} has non-date value columns: {e}") from e
    return dates


def fetch_sources(
    sources: Dict[str, str],
    timeout: float = 30,
    date_format: str = "%m/%d/%y"
) -> Dict[str, pd.DataFrame]:
    """
    Fetch and validate every configured source.
    
    Args:
        sources: Mapping of metric name (confirmed, deaths, ...) to URL
        timeout: Request timeout in seconds
        date_format: Format of the date column labels
        
    Returns:
        Mapping of metric name to wide DataFrame
    """
    tables = {}
    for metric, url in sources.items():
        print(f"Fetching {metric} from {url}...")
        df = fetch_csv(url, timeout=timeout)
        dates = validate_wide_schema(df, name=metric, date_format=date_format)
        print(f"  → {len(df)} rows, {len(dates)} dates ({dates[0]} - {dates[-1]})")
        tables[metric] = df
    return tables
