import matplotlib

matplotlib.use("Agg")

import numpy as np
import pandas as pd
import pytest

DATES = ["1/22/20", "1/23/20", "1/24/20"]


def make_wide(rows, dates=DATES):
    """Build a JHU-style wide table from (province, country, values) rows."""
    records = []
    for province, country, values in rows:
        record = {
            "Province/State": province,
            "Country/Region": country,
            "Lat": 64.9,
            "Long": -19.0,
        }
        record.update(dict(zip(dates, values)))
        records.append(record)
    return pd.DataFrame(records, columns=["Province/State", "Country/Region", "Lat", "Long", *dates])


@pytest.fixture
def cases_wide():
    return make_wide([
        (np.nan, "Iceland", [5, 15, 40]),
        (np.nan, "Malta", [0, 2, 6]),
        ("Ontario", "Canada", [10, 12, 20]),
        ("Quebec", "Canada", [20, 25, 30]),
    ])


@pytest.fixture
def deaths_wide():
    return make_wide([
        (np.nan, "Iceland", [1, 2, 5]),
        (np.nan, "Malta", [0, 0, 1]),
        ("Ontario", "Canada", [1, 1, 2]),
        ("Quebec", "Canada", [2, 3, 3]),
    ])


@pytest.fixture
def cfg():
    return {
        "data": {
            "sources": {
                "confirmed": "https://example.test/confirmed.csv",
                "deaths": "https://example.test/deaths.csv",
                "recovered": "https://example.test/recovered.csv",
            },
            "fetch": {"timeout": 5},
        },
        "processing": {"countries": ["Iceland", "Canada"], "date_format": "%m/%d/%y"},
        "reporting": {"output_dir": "results/report", "dpi": 50, "log_scale": True},
        "regression": {"min_points": 3},
    }
