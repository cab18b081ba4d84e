import numpy as np
import pandas as pd
import pytest

from covid_report.data.aggregate import (
    aggregate_by_country,
    build_country_day_table,
    compute_daily_deltas,
    filter_positive_cases,
    join_metrics,
    parse_dates,
)
from covid_report.data.reshape import wide_to_long
from tests.conftest import make_wide


def test_provinces_sum_to_country_total():
    cases = make_wide([("A", "Canada", [10]), ("B", "Canada", [20])], dates=["3/1/20"])
    deaths = make_wide([("A", "Canada", [1]), ("B", "Canada", [2])], dates=["3/1/20"])

    table = build_country_day_table(cases, deaths)

    assert len(table) == 1
    row = table.iloc[0]
    assert row["country"] == "Canada"
    assert row["date"] == pd.Timestamp("2020-03-01")
    assert row["cases"] == 30
    assert row["deaths"] == 3


def test_country_day_pairs_are_unique(cases_wide, deaths_wide):
    table = build_country_day_table(cases_wide, deaths_wide)

    assert not table.duplicated(subset=["country", "date"]).any()


def test_all_rows_have_positive_cases(cases_wide, deaths_wide):
    table = build_country_day_table(cases_wide, deaths_wide)

    assert (table["cases"] > 0).all()
    # Malta has zero cases on the first day
    assert len(table[table["country"] == "Malta"]) == 2


def test_outer_join_keeps_unmatched_rows(cases_wide):
    cases_long = wide_to_long(cases_wide, "cases")
    deaths_only = wide_to_long(
        make_wide([(np.nan, "Iceland", [1, 2, 5]), (np.nan, "Nowhere", [3, 3, 3])]),
        "deaths",
    )

    joined = join_metrics(cases_long, deaths_only)

    nowhere = joined[joined["country"] == "Nowhere"]
    assert len(nowhere) == 3
    assert nowhere["cases"].isna().all()
    canada = joined[joined["country"] == "Canada"]
    assert canada["deaths"].isna().all()
    iceland = joined[joined["country"] == "Iceland"]
    assert iceland["deaths"].tolist() == [1, 2, 5]


def test_partial_deaths_sum_reported_provinces():
    joined = pd.DataFrame({
        "province": ["A", "B"],
        "country": ["X", "X"],
        "date": pd.to_datetime(["2020-03-01", "2020-03-01"]),
        "cases": [4.0, 6.0],
        "deaths": [1.0, np.nan],
    })

    table = aggregate_by_country(joined)

    assert table["cases"].tolist() == [10]
    assert table["deaths"].tolist() == [1]


def test_unreported_deaths_stay_missing():
    joined = pd.DataFrame({
        "province": ["A", "B"],
        "country": ["X", "X"],
        "date": pd.to_datetime(["2020-03-01", "2020-03-01"]),
        "cases": [4.0, 6.0],
        "deaths": [np.nan, np.nan],
    })

    table = aggregate_by_country(joined)

    assert table["cases"].tolist() == [10]
    assert table["deaths"].isna().all()


def test_missing_middle_day_of_deaths_is_not_zero():
    cases = make_wide([(np.nan, "Iceland", [5, 15, 40])])
    deaths = make_wide([(np.nan, "Iceland", [1, 5])], dates=["1/22/20", "1/24/20"])

    table = build_country_day_table(cases, deaths)

    assert table["cases"].tolist() == [5, 15, 40]
    assert table["deaths"].iloc[0] == 1
    assert pd.isna(table["deaths"].iloc[1])
    assert table["deaths"].iloc[2] == 5

    deltas = compute_daily_deltas(table, "Iceland")

    assert deltas["new_cases"].tolist() == [10, 25]
    assert deltas["new_deaths"].isna().all()


def test_filter_drops_missing_and_nonpositive_cases():
    df = pd.DataFrame({"cases": [0, -1, np.nan, 3], "deaths": [0, 0, 1, 0]})

    assert filter_positive_cases(df)["cases"].tolist() == [3]


def test_parse_dates_two_digit_year():
    df = pd.DataFrame({"date": ["1/22/20", "12/31/21"]})

    parsed = parse_dates(df)

    assert parsed["date"].tolist() == [pd.Timestamp("2020-01-22"), pd.Timestamp("2021-12-31")]


def test_daily_deltas_end_to_end(cases_wide, deaths_wide):
    table = build_country_day_table(cases_wide, deaths_wide)

    deltas = compute_daily_deltas(table, "Iceland")

    assert len(deltas) == 2
    assert deltas["date"].tolist() == [pd.Timestamp("2020-01-23"), pd.Timestamp("2020-01-24")]
    assert deltas["new_cases"].tolist() == [10, 25]
    assert deltas["new_deaths"].tolist() == [1, 3]


def test_deltas_match_first_difference(cases_wide, deaths_wide):
    table = build_country_day_table(cases_wide, deaths_wide)
    canada = table[table["country"] == "Canada"].sort_values("date")

    deltas = compute_daily_deltas(table, "Canada")

    assert canada["date"].iloc[0] not in set(deltas["date"])
    cases = canada["cases"].tolist()
    expected = [cases[i] - cases[i - 1] for i in range(1, len(cases))]
    assert deltas["new_cases"].tolist() == expected


def test_deltas_sort_by_date():
    table = pd.DataFrame({
        "country": ["X"] * 3,
        "date": pd.to_datetime(["2020-03-03", "2020-03-01", "2020-03-02"]),
        "cases": [9, 1, 4],
        "deaths": [3, 0, 1],
    })

    deltas = compute_daily_deltas(table, "X")

    assert deltas["new_cases"].tolist() == [3, 5]
    assert deltas["new_deaths"].tolist() == [1, 2]


def test_downward_revision_passes_through():
    table = pd.DataFrame({
        "country": ["X"] * 3,
        "date": pd.to_datetime(["2020-03-01", "2020-03-02", "2020-03-03"]),
        "cases": [10, 8, 12],
        "deaths": [2, 2, 1],
    })

    deltas = compute_daily_deltas(table, "X")

    assert deltas["new_cases"].tolist() == [-2, 4]
    assert deltas["new_deaths"].tolist() == [0, -1]


def test_unknown_country_warns_and_is_empty(cases_wide, deaths_wide):
    table = build_country_day_table(cases_wide, deaths_wide)

    with pytest.warns(UserWarning, match="Atlantis"):
        deltas = compute_daily_deltas(table, "Atlantis")

    assert deltas.empty
