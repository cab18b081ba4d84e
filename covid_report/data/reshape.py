"""
Reshaper - STAGE 2

Wide (one column per date) to long (one row per location-date).
"""
from typing import List

import pandas as pd

from .schema import GEO_COLUMNS, RENAME_MAP, WIDE_ID_COLUMNS


def date_columns(df: pd.DataFrame) -> List[str]:
    """Return the value columns of a wide table, in source order."""
    return [c for c in df.columns if c not in WIDE_ID_COLUMNS]


def wide_to_long(df: pd.DataFrame, value_name: str) -> pd.DataFrame:
    """
    Pivot every date column of a wide table into (date, value) rows.
    
    Lat/Long are dropped and the identifier columns renamed to
    province/country. Whole-country rows keep a NaN province.
    
    Args:
        df: Wide table (Province/State, Country/Region, Lat, Long, dates...)
        value_name: Name of the value column (e.g. 'cases', 'deaths')
        
    Returns:
        DataFrame with columns: province, country, date, <value_name>
    """
    id_cols = [c for c in WIDE_ID_COLUMNS if c not in GEO_COLUMNS]

    long_df = pd.melt(
        df.drop(columns=GEO_COLUMNS),
        id_vars=id_cols,
        value_vars=date_columns(df),
        var_name='date',
        value_name=value_name,
    )
    long_df = long_df.rename(columns=RENAME_MAP)
    # province must share one dtype across tables, even when entirely null
    long_df['province'] = long_df['province'].astype('string')
    return long_df
