import pandas as pd
import pytest

from txrealty.metrics.frequency import (
    FREQUENCY_COLUMNS,
    bin_classes,
    build_frequencies,
    frequency_table,
    gini_index,
)


def test_city_frequencies(panel):
    table = frequency_table(panel["city"])
    assert list(table.columns) == FREQUENCY_COLUMNS
    assert list(table.index) == sorted(panel["city"].unique())
    assert table.loc["Beaumont", "abs_freq"] == 60
    assert table.loc["Beaumont", "rel_freq"] == pytest.approx(0.25)
    assert table["rel_freq"].sum() == pytest.approx(1.0)
    assert table["cum_abs_freq"].iloc[-1] == 240
    assert table["cum_rel_freq"].iloc[-1] == 1.0


@pytest.mark.parametrize("column", ["year", "month"])
def test_discrete_frequencies_sum_to_one(panel, column):
    table = frequency_table(panel[column])
    assert table["rel_freq"].sum() == pytest.approx(1.0)
    assert table["cum_rel_freq"].iloc[-1] == 1.0
    assert table.index.is_monotonic_increasing


def test_explicit_order_keeps_missing_categories():
    table = frequency_table(pd.Series(["b", "a", "b"]), order=["c", "b", "a"])
    assert list(table.index) == ["c", "b", "a"]
    assert table["abs_freq"].tolist() == [0, 2, 1]
    assert table["cum_abs_freq"].tolist() == [0, 2, 3]


def test_gini_uniform_is_one(panel):
    assert gini_index(panel["city"]) == pytest.approx(1.0)


def test_gini_single_category_is_zero():
    assert gini_index(pd.Series(["x"] * 12)) == 0.0
    assert gini_index(pd.Series(["a"] * 10), order=["a", "b", "c"]) == pytest.approx(0.0)


def test_gini_known_value():
    # f = (0.5, 0.25, 0.25): 1 - 0.375 = 0.625, normalized by 2/3
    values = pd.Series(["a", "a", "b", "c"])
    assert gini_index(values) == pytest.approx(0.625 / (2 / 3))


def test_bin_classes_span_min_max(panel):
    classes = bin_classes(panel["median_price"], n_classes=15)
    assert classes.notna().all()
    assert len(classes.cat.categories) == 15
    assert classes.name == "median_price_class"
    lowest = classes[panel["median_price"].idxmin()]
    highest = classes[panel["median_price"].idxmax()]
    assert lowest == classes.cat.categories[0]
    assert highest == classes.cat.categories[-1]


def test_binned_table_keeps_empty_classes():
    values = pd.Series([0.0, 0.1, 0.2, 10.0], name="x")
    table = frequency_table(bin_classes(values, n_classes=5))
    assert len(table) == 5
    assert table["abs_freq"].tolist() == [3, 0, 0, 0, 1]
    assert table["cum_rel_freq"].iloc[-1] == 1.0


def test_build_frequencies(panel):
    tables = build_frequencies(panel, ["city", "year", "month"], ["median_price"], n_classes=15)
    assert set(tables) == {"freq_city", "freq_year", "freq_month", "freq_median_price_classes", "gini"}
    gini = tables["gini"]
    assert gini.loc["city", "classes"] == 4
    assert gini.loc["month", "gini"] == pytest.approx(1.0)
    assert gini.loc["median_price_class", "classes"] == 15
    assert 0.0 <= gini.loc["median_price_class", "gini"] <= 1.0
